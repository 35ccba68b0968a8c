from prometheus_client import Counter

schema_comparisons_total = Counter(
    "schemadrift_comparisons_total",
    "Number of schema comparisons performed",
    ["mode"],
)

schema_changes_total = Counter(
    "schemadrift_changes_total",
    "Number of changes detected across all comparisons",
    ["severity"],
)

spec_load_failures_total = Counter(
    "schemadrift_spec_load_failures_total",
    "Number of schema documents that could not be loaded",
)
