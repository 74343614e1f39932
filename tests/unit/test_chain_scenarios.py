"""
End-to-end record/replay scenarios
"""
import pytest

from fluent_double import (
    ANY,
    ArgumentMismatchError,
    IncompleteChainError,
    MethodMismatchError,
    UnexpectedExtraCallError,
)
from utils import COUNTRY_QUERY_CALLS, ChainScenarioFactory, CustomerDirectory, RecordedCall, RepoLookup


class TestCountryQueryScenario:
    """select -> field -> equals -> sort -> get_query -> execute"""

    def test_exact_replay_returns_terminal_value(self, session, country_query):
        directory = CustomerDirectory(country_query.double)

        assert directory.by_country("USA") == "OK"
        session.verify_complete()

    def test_changed_argument_fails_at_equals(self, country_query):
        directory = CustomerDirectory(country_query.double)

        with pytest.raises(ArgumentMismatchError) as exc_info:
            directory.by_country("UK")

        err = exc_info.value
        assert err.position == 2
        assert err.argument == 0
        assert err.expected == "USA"
        assert err.actual == "UK"
        assert "expected 'USA', got 'UK'" in str(err)

    def test_stopping_early_leaves_incomplete_chain(self, session, country_query):
        CustomerDirectory(country_query.double).partial_filter("USA")

        with pytest.raises(IncompleteChainError) as exc_info:
            session.verify_complete()

        assert exc_info.value.remaining == ["sort('x', 'y')", "get_query()"]

    def test_child_chain_incomplete_when_execute_missing(self, session, country_query):
        double = country_query.double
        double.select("a", "b").field("c").equals("USA").sort("x", "y").get_query()

        with pytest.raises(IncompleteChainError) as exc_info:
            double.verify_complete()

        assert exc_info.value.chain_id == "query#1"
        assert exc_info.value.remaining == ["execute()"]
        with pytest.raises(IncompleteChainError, match="query#1"):
            session.verify_complete()

    def test_wildcard_country(self, session):
        builder = ChainScenarioFactory.record_country_query(session, country=ANY, result=["row"])

        assert CustomerDirectory(builder.double).by_country("anything-at-all") == ["row"]
        session.verify_complete()


class TestWildcardScenario:
    def test_field_then_equals_wildcard(self, session):
        recorder = session.record("query_builder")
        recorder.field("country").equals(ANY)

        double = recorder.double
        double.field("country").equals("anything-at-all")

        session.verify_complete()

    @pytest.mark.parametrize("value", [None, 0, 3.5, ("t", "u"), {"k": [1]}, object()])
    def test_wildcard_accepts_any_type(self, session, value):
        recorder = session.record("query_builder")
        recorder.field("country").equals(ANY)

        recorder.double.field("country").equals(value)

        session.verify_complete()

    @pytest.mark.parametrize("recorded, replayed", [(1, True), (0, False), (1, 1.0)])
    def test_changed_argument_type_fails(self, session, recorded, replayed):
        recorder = session.record("query_builder")
        recorder.field("count").equals(recorded)

        with pytest.raises(ArgumentMismatchError) as exc_info:
            recorder.double.field("count").equals(replayed)

        assert exc_info.value.position == 1
        assert exc_info.value.actual is replayed

    def test_replayed_wildcard_does_not_match_none(self, session):
        recorder = session.record("query_builder")
        recorder.field("country").equals(None)

        with pytest.raises(ArgumentMismatchError) as exc_info:
            recorder.double.field("country").equals(ANY)

        assert exc_info.value.expected is None
        assert exc_info.value.actual is ANY


class TestOrderingProperties:
    """Properties that must hold for every position of a chain"""

    @pytest.mark.parametrize("position", range(len(COUNTRY_QUERY_CALLS)))
    def test_swapped_method_fails_at_position(self, session, position):
        recorder = ChainScenarioFactory.record_calls(session, COUNTRY_QUERY_CALLS)
        calls = list(COUNTRY_QUERY_CALLS)
        calls[position] = RecordedCall("limit", calls[position].args)

        double = session.double_for("query_builder#0")
        with pytest.raises(MethodMismatchError) as exc_info:
            ChainScenarioFactory.replay_calls(double, calls)

        assert exc_info.value.position == position
        assert exc_info.value.expected == COUNTRY_QUERY_CALLS[position].method_name
        assert exc_info.value.actual == "limit"
        # nothing past the failing call was attempted
        assert len(double.received_calls) == position + 1
        assert recorder.chain.next_expected_index == position

    @pytest.mark.parametrize("position", range(len(COUNTRY_QUERY_CALLS)))
    def test_altered_argument_fails_at_position(self, session, position):
        ChainScenarioFactory.record_calls(session, COUNTRY_QUERY_CALLS)
        calls = list(COUNTRY_QUERY_CALLS)
        altered = ("altered",) + calls[position].args[1:]
        calls[position] = RecordedCall(calls[position].method_name, altered)

        with pytest.raises(ArgumentMismatchError) as exc_info:
            ChainScenarioFactory.replay_calls(session.double_for("query_builder#0"), calls)

        assert exc_info.value.position == position
        assert exc_info.value.argument == 0
        assert exc_info.value.actual == "altered"

    def test_extra_call_fails_on_n_plus_one(self, session):
        ChainScenarioFactory.record_calls(session, COUNTRY_QUERY_CALLS)
        double = session.double_for("query_builder#0")
        ChainScenarioFactory.replay_calls(double, COUNTRY_QUERY_CALLS)

        with pytest.raises(UnexpectedExtraCallError) as exc_info:
            double.limit(5)

        assert exc_info.value.method_name == "limit"
        assert exc_info.value.position == len(COUNTRY_QUERY_CALLS)

    def test_fewer_calls_names_unconsumed_suffix(self, session):
        ChainScenarioFactory.record_calls(session, COUNTRY_QUERY_CALLS)
        double = session.double_for("query_builder#0")
        ChainScenarioFactory.replay_calls(double, COUNTRY_QUERY_CALLS[:1])

        with pytest.raises(IncompleteChainError) as exc_info:
            double.verify_complete()

        assert exc_info.value.position == 1
        assert exc_info.value.remaining == ["field('c')", "equals('USA')", "sort('x', 'y')"]


class TestPostgrestScenario:
    def test_repo_lookup_chain(self, session):
        rows = [{"id": 1, "repo_name": "billing-api"}]
        client = session.record("postgrest")
        (
            client.table("repos")
            .select("id, repo_name")
            .eq("user_id", "u-1")
            .order("created_at", desc=True)
            .limit(10)
            .execute()
            .terminal(rows)
        )

        assert RepoLookup(client.double).by_user("u-1") == rows
        session.verify_complete()

    def test_repo_lookup_wrong_keyword(self, session):
        client = session.record("postgrest")
        (
            client.table("repos")
            .select("id, repo_name")
            .eq("user_id", "u-1")
            .order("created_at", desc=False)
            .limit(10)
            .execute()
        )

        with pytest.raises(ArgumentMismatchError) as exc_info:
            RepoLookup(client.double).by_user("u-1")

        assert exc_info.value.argument == "desc"
        assert exc_info.value.expected is False
        assert exc_info.value.actual is True

    def test_execute_can_raise(self, session):
        client = session.record("postgrest")
        request = client.table("repos").select("id, repo_name").eq("user_id", "u-1")
        request.order("created_at", desc=True).limit(10).execute().raises(TimeoutError("slow"))

        with pytest.raises(TimeoutError, match="slow"):
            RepoLookup(client.double).by_user("u-1")
