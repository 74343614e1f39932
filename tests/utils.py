"""
Test utilities and helper functions for the test suite
"""
from typing import Any, List, NamedTuple, Tuple

from fluent_double.service.recorder import ChainRecorder
from fluent_double.service.session import ChainSession


class RecordedCall(NamedTuple):
    method_name: str
    args: Tuple[Any, ...]


COUNTRY_QUERY_CALLS: List[RecordedCall] = [
    RecordedCall("select", ("a", "b")),
    RecordedCall("field", ("c",)),
    RecordedCall("equals", ("USA",)),
    RecordedCall("sort", ("x", "y")),
]


class ChainScenarioFactory:
    """Factory for recorded chains used across the suite"""

    @staticmethod
    def record_country_query(
        session: ChainSession, country: Any = "USA", result: Any = "OK"
    ) -> ChainRecorder:
        """Record the builder chain and return the ROOT recorder."""
        builder = session.record("query_builder")
        query = (
            builder.select("a", "b")
            .field("c")
            .equals(country)
            .sort("x", "y")
            .get_query()
        )
        query.execute().terminal(result)
        return builder

    @staticmethod
    def record_calls(
        session: ChainSession, calls: List[RecordedCall], surface: str = "query_builder"
    ) -> ChainRecorder:
        recorder = session.record(surface)
        for call in calls:
            recorder = recorder.record(call.method_name, *call.args)
        return recorder

    @staticmethod
    def replay_calls(double: Any, calls: List[RecordedCall]) -> Any:
        result = double
        for call in calls:
            result = getattr(result, call.method_name)(*call.args)
        return result


class CustomerDirectory:
    """Stand-in for production code that drives an injected query builder."""

    def __init__(self, builder: Any):
        self._builder = builder

    def by_country(self, country: str) -> Any:
        query = (
            self._builder.select("a", "b")
            .field("c")
            .equals(country)
            .sort("x", "y")
            .get_query()
        )
        return query.execute()

    def partial_filter(self, country: str) -> Any:
        return self._builder.select("a", "b").field("c").equals(country)


class RepoLookup:
    """Stand-in for production code using a supabase-style postgrest client."""

    def __init__(self, client: Any):
        self._client = client

    def by_user(self, user_id: str) -> Any:
        response = (
            self._client.table("repos")
            .select("id, repo_name")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .limit(10)
            .execute()
        )
        return response
