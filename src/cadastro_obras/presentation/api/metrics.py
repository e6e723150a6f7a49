from prometheus_client import CollectorRegistry, Counter

registry = CollectorRegistry()

documento_validations = Counter(
    "documento_validations_total",
    "CPF/CNPJ inputs evaluated, by document kind and field status",
    ["kind", "status"],
    registry=registry,
)
