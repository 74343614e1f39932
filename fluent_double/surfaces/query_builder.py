from fluent_double.models.surface import MethodRole, MethodSpec, MethodSurface

QUERY_BUILDER = "query_builder"
QUERY = "query"

query_builder_surface = MethodSurface(
    name=QUERY_BUILDER,
    methods={
        "select": MethodSpec(),
        "field": MethodSpec(),
        "equals": MethodSpec(),
        "not_equals": MethodSpec(),
        "greater_than": MethodSpec(),
        "less_than": MethodSpec(),
        "contains": MethodSpec(),
        "in_": MethodSpec(),
        "sort": MethodSpec(),
        "limit": MethodSpec(),
        "skip": MethodSpec(),
        "get_query": MethodSpec(role=MethodRole.CHILD, child_surface=QUERY),
    },
)

query_surface = MethodSurface(
    name=QUERY,
    methods={
        "execute": MethodSpec(role=MethodRole.TERMINAL),
        "count": MethodSpec(role=MethodRole.TERMINAL, default_value=0),
        "first": MethodSpec(role=MethodRole.TERMINAL),
    },
)
