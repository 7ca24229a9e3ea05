from .summaries import (
    ActiveBalance,
    FinanceSummary,
    InvoiceSummary,
    MonthlyFinance,
    MonthlyOrders,
    OrdersSummary,
    PipelineSummary,
    active_balances,
    finance_summary,
    invoice_summary,
    monthly_entries,
    monthly_finance,
    monthly_orders,
    orders_summary,
    pipeline_summary,
)

__all__ = [
    "ActiveBalance",
    "FinanceSummary",
    "InvoiceSummary",
    "MonthlyFinance",
    "MonthlyOrders",
    "OrdersSummary",
    "PipelineSummary",
    "active_balances",
    "finance_summary",
    "invoice_summary",
    "monthly_entries",
    "monthly_finance",
    "monthly_orders",
    "orders_summary",
    "pipeline_summary",
]
