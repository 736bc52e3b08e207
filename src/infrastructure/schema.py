"""Relational schema of the ledger database.

Column names keep the camelCase used by existing databases. Statements are
executed one by one because SQLite drivers reject multi-statement strings.
"""

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine

from src.infrastructure.logging.logger import get_app_logger

SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS users (
        id TEXT PRIMARY KEY,
        name TEXT,
        email TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS accounts (
        id TEXT PRIMARY KEY,
        userId TEXT NOT NULL,
        name TEXT NOT NULL,
        balance REAL NOT NULL DEFAULT 0,
        type TEXT,
        commission REAL NOT NULL DEFAULT 0,
        FOREIGN KEY (userId) REFERENCES users(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS expenses (
        id TEXT PRIMARY KEY,
        userId TEXT NOT NULL,
        date TEXT NOT NULL,
        type TEXT NOT NULL,
        category TEXT NOT NULL,
        amount REAL NOT NULL,
        paymentAccount TEXT NOT NULL,
        responsible TEXT,
        observations TEXT,
        timestamp TEXT NOT NULL,
        FOREIGN KEY (userId) REFERENCES users(id),
        FOREIGN KEY (paymentAccount) REFERENCES accounts(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS incomes (
        id TEXT PRIMARY KEY,
        userId TEXT NOT NULL,
        date TEXT NOT NULL,
        client TEXT NOT NULL,
        brandName TEXT,
        country TEXT NOT NULL,
        servicesDetails TEXT NOT NULL,
        amountPaid REAL NOT NULL,
        paymentAccount TEXT NOT NULL,
        responsible TEXT NOT NULL,
        observations TEXT,
        dueDate TEXT,
        status TEXT NOT NULL DEFAULT 'active',
        totalContractedAmount REAL NOT NULL,
        commissionRate REAL NOT NULL,
        commissionAmount REAL NOT NULL,
        amountWithCommission REAL NOT NULL,
        remainingBalance REAL NOT NULL,
        timestamp TEXT NOT NULL,
        FOREIGN KEY (userId) REFERENCES users(id),
        FOREIGN KEY (paymentAccount) REFERENCES accounts(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS reminders (
        id TEXT PRIMARY KEY,
        userId TEXT NOT NULL,
        incomeId TEXT,
        adminPaymentId TEXT,
        clientId TEXT,
        brandName TEXT,
        service TEXT,
        renewalAmount REAL,
        debtAmount REAL,
        dueDate TEXT NOT NULL,
        status TEXT NOT NULL DEFAULT 'pending',
        message TEXT,
        timestamp TEXT NOT NULL,
        resolvedAt TEXT,
        FOREIGN KEY (userId) REFERENCES users(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id TEXT PRIMARY KEY,
        userId TEXT NOT NULL,
        type TEXT NOT NULL,
        date TEXT NOT NULL,
        amount REAL NOT NULL,
        account TEXT,
        sourceAccount TEXT,
        destinationAccount TEXT,
        observations TEXT,
        timestamp TEXT NOT NULL,
        FOREIGN KEY (userId) REFERENCES users(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS clientPayments (
        id TEXT PRIMARY KEY,
        userId TEXT NOT NULL,
        clientName TEXT NOT NULL,
        date TEXT NOT NULL,
        amount REAL NOT NULL,
        account TEXT,
        incomeIds TEXT,
        timestamp TEXT NOT NULL,
        FOREIGN KEY (userId) REFERENCES users(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS adminPayments (
        id TEXT PRIMARY KEY,
        userId TEXT NOT NULL,
        conceptName TEXT,
        category TEXT,
        providerName TEXT,
        contractNumber TEXT,
        referenceNumber TEXT,
        providerId TEXT,
        paymentAmount REAL,
        paymentCurrency TEXT,
        paymentFrequency TEXT,
        paymentDueDate TEXT,
        renewalDate TEXT,
        paymentMethod TEXT,
        beneficiaryBank TEXT,
        beneficiaryAccountNumber TEXT,
        beneficiaryAccountType TEXT,
        notes TEXT,
        createdAt TEXT,
        updatedAt TEXT,
        FOREIGN KEY (userId) REFERENCES users(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS employees (
        id TEXT PRIMARY KEY,
        userId TEXT NOT NULL,
        name TEXT,
        cedula TEXT,
        phone TEXT,
        bank TEXT,
        paymentMethod TEXT,
        biWeeklySalary REAL,
        monthlySalary REAL,
        FOREIGN KEY (userId) REFERENCES users(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS payrollPayments (
        id TEXT PRIMARY KEY,
        userId TEXT NOT NULL,
        employeeId TEXT,
        employeeName TEXT,
        paymentType TEXT,
        month INTEGER,
        year INTEGER,
        totalAmount REAL,
        date TEXT,
        observations TEXT,
        timestamp TEXT,
        paymentAccount TEXT,
        expenseId TEXT,
        FOREIGN KEY (userId) REFERENCES users(id),
        FOREIGN KEY (employeeId) REFERENCES employees(id)
    )
    """,
)

TABLE_NAMES = (
    "users",
    "accounts",
    "expenses",
    "incomes",
    "reminders",
    "transactions",
    "clientPayments",
    "adminPayments",
    "employees",
    "payrollPayments",
)

SEED_USER_SQL = text(
    """
    INSERT INTO users (id, name, email)
    VALUES (:id, :name, :email)
    ON CONFLICT (id) DO NOTHING
    """
)


def _ensure_payroll_expense_column(engine: Engine, logger) -> None:
    """Add ``payrollPayments.expenseId`` to databases created without it."""
    columns = {
        column["name"].lower()
        for column in inspect(engine).get_columns("payrollPayments")
    }
    if "expenseid" in columns:
        return
    with engine.begin() as conn:
        conn.execute(
            text("ALTER TABLE payrollPayments ADD COLUMN expenseId TEXT")
        )
    logger.info("Added payrollPayments.expenseId column")


def ensure_schema(engine: Engine, logger=None) -> None:
    """Create every table that does not exist yet.

    Args:
        engine: Engine connected to the ledger database.
        logger: Optional logger. Defaults to the app logger.
    """
    logger = logger or get_app_logger()
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.execute(text(statement))
    _ensure_payroll_expense_column(engine, logger)
    logger.info("Ledger schema is ready")


def seed_user(
    engine: Engine,
    user_id: str,
    name: str = "Developer",
    email: str = "dev@example.com",
) -> None:
    """Insert the user row every record references, if missing."""
    with engine.begin() as conn:
        conn.execute(
            SEED_USER_SQL,
            {"id": user_id, "name": name, "email": email},
        )


__all__ = ["SCHEMA_STATEMENTS", "TABLE_NAMES", "ensure_schema", "seed_user"]
