"""Domain constants for the finance tracker."""

ACCOUNT_TYPES = ("Efectivo", "Digital", "Bancario")

EXPENSE_TYPES = ("fijo", "variable")

INCOME_STATUSES = ("active", "cancelled")

AVAILABLE_SERVICES = (
    "LOGO",
    "MASCOTA",
    "WEB",
    "REDES",
    "MONSTER HIVE",
    "HD",
    "MEDIOS GRÁFICOS",
    "OTROS",
)

DEFAULT_DUE_DATE_SERVICES = ("REDES", "MONSTER HIVE")

WITHDRAWAL = "withdrawal"
ACCOUNT_TRANSFER = "accountTransfer"
TRANSACTION_TYPES = (WITHDRAWAL, ACCOUNT_TRANSFER)

PAYROLL_PAYMENT_TYPES = ("4th", "20th", "bonus")
PAYROLL_EXPENSE_TYPE = "fijo"
PAYROLL_EXPENSE_CATEGORY = "Nómina"
PAYROLL_EXPENSE_RESPONSIBLE = "Sistema"

ADMIN_PAYMENT_CATEGORIES = (
    "Servicios Básicos",
    "Alquiler",
    "Seguros",
    "Préstamos/Créditos",
    "Suscripciones/Membresías",
    "Impuestos",
    "Otros",
)
ADMIN_PAYMENT_FREQUENCIES = (
    "Mensual",
    "Bimestral",
    "Trimestral",
    "Anual",
    "Única vez",
)
BENEFICIARY_ACCOUNT_TYPES = ("Ahorro", "Corriente")
ALL_CATEGORIES = "Todos"

REMINDER_PENDING = "pending"
REMINDER_RESOLVED = "resolved"

DEFAULT_CASH_ACCOUNT_NAME = "Efectivo (Caja)"
DEFAULT_CURRENCY = "USD"


__all__ = [
    "ACCOUNT_TYPES",
    "EXPENSE_TYPES",
    "INCOME_STATUSES",
    "AVAILABLE_SERVICES",
    "DEFAULT_DUE_DATE_SERVICES",
    "WITHDRAWAL",
    "ACCOUNT_TRANSFER",
    "TRANSACTION_TYPES",
    "PAYROLL_PAYMENT_TYPES",
    "PAYROLL_EXPENSE_TYPE",
    "PAYROLL_EXPENSE_CATEGORY",
    "PAYROLL_EXPENSE_RESPONSIBLE",
    "ADMIN_PAYMENT_CATEGORIES",
    "ADMIN_PAYMENT_FREQUENCIES",
    "BENEFICIARY_ACCOUNT_TYPES",
    "ALL_CATEGORIES",
    "REMINDER_PENDING",
    "REMINDER_RESOLVED",
    "DEFAULT_CASH_ACCOUNT_NAME",
    "DEFAULT_CURRENCY",
]
