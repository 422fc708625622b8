"""Small pure helpers shared by every fetcher."""

from .ir import OperationDescriptor


def generate_query_key(op: OperationDescriptor) -> str:
    """Cache key literal for a query, evaluated against the call-site variables."""
    return f"['{op.name}', variables]"


def generate_query_variables_signature(op: OperationDescriptor) -> str:
    """Variables parameter of a query binding, optional unless a variable is required."""
    optional = "" if op.has_required_variables else "?"
    return f"variables{optional}: {op.variables_type}"


def generate_mutation_variables_signature(op: OperationDescriptor) -> str:
    # mutation variables stay optional, the hook's generics enforce them
    return f"variables?: {op.variables_type}"


def typed_fetcher(fn_name: str, op: OperationDescriptor) -> str:
    return f"{fn_name}<{op.result_type}, {op.variables_type}>"
