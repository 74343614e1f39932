"""
Surfaces mirroring the supabase-py / postgrest request builder:

    client.table("repos").select("id, name").eq("user_id", uid).order("created_at").execute()
"""
from fluent_double.models.surface import MethodRole, MethodSpec, MethodSurface

POSTGREST_CLIENT = "postgrest"
POSTGREST_REQUEST = "postgrest_request"

_REQUEST_CHAIN_METHODS = (
    "select", "insert", "update", "upsert", "delete",
    "eq", "neq", "gt", "gte", "lt", "lte", "like", "ilike", "is_", "in_",
    "order", "limit", "range", "single", "maybe_single",
)

postgrest_client_surface = MethodSurface(
    name=POSTGREST_CLIENT,
    methods={
        "table": MethodSpec(role=MethodRole.CHILD, child_surface=POSTGREST_REQUEST),
        "from_": MethodSpec(role=MethodRole.CHILD, child_surface=POSTGREST_REQUEST),
    },
)

postgrest_request_surface = MethodSurface(
    name=POSTGREST_REQUEST,
    methods={
        **{name: MethodSpec() for name in _REQUEST_CHAIN_METHODS},
        "execute": MethodSpec(role=MethodRole.TERMINAL),
    },
)
