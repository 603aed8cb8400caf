"""Domain constants for finance records."""

ALL_FILTER = "all"

SUGGESTED_EXPENSE_CATEGORIES = (
    "Alimentação",
    "Transporte",
    "Moradia",
    "Saúde",
    "Educação",
    "Lazer",
    "Vestuário",
    "Serviços",
    "Impostos",
    "Outros",
)

SUGGESTED_INCOME_CATEGORIES = (
    "Salário",
    "Freelance",
    "Investimentos",
    "Vendas",
    "Benefícios",
    "Outros",
)

SUGGESTED_RESPONSIBLES = (
    "João",
    "Maria",
    "Pedro",
    "Ana",
    "Carlos",
    "Lucia",
)


def suggested_categories(kind) -> tuple[str, ...]:
    """Return the suggested categories for a record kind.

    Args:
        kind: ``RecordKind`` member or its string value.

    Returns:
        tuple[str, ...]: Suggestions; unknown kinds get the expense list.
    """
    value = getattr(kind, "value", kind)
    if value == "income":
        return SUGGESTED_INCOME_CATEGORIES
    return SUGGESTED_EXPENSE_CATEGORIES


__all__ = [
    "ALL_FILTER",
    "SUGGESTED_EXPENSE_CATEGORIES",
    "SUGGESTED_INCOME_CATEGORIES",
    "SUGGESTED_RESPONSIBLES",
    "suggested_categories",
]
