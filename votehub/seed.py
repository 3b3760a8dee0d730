"""Seed utilities for loading the demo dataset.

`seed_database` can be reused by routers or scripts. It walks the seed steps
in dependency order and, for every entity:

1. makes sure uuid generation is available (PostgreSQL only),
2. creates the table if it does not exist,
3. prepares all rows of the entity concurrently (password hashing happens here),
4. inserts them with ``ON CONFLICT (<key>) DO NOTHING``.

All steps share one connection and one transaction. Any failure rolls the
whole seed back and is reported through the returned `SeedResult`; nothing is
retried.
"""
from __future__ import annotations

import datetime as dt
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import Table, text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Connection
from sqlalchemy.orm import Session

from votehub import models, placeholder_data
from votehub.errors import SeedConfigurationError, SeedError
from votehub.passwords import get_password_hash

logger = logging.getLogger(__name__)

SEED_WORKERS = int(os.getenv("SEED_WORKERS", "4"))
SEED_ANSWERS_LEGACY_MAPPING = os.getenv("SEED_ANSWERS_LEGACY_MAPPING", "0").lower() in ("1", "true", "yes")

Row = Dict[str, Any]

# answers column -> key in the dataset row
ANSWER_COLUMN_MAP: Mapping[str, str] = {
    "id": "id",
    "sh_id": "sh_id",
    "question_id": "q_id",
    "choice_id": "choice_id",
}

# Shareholder and question ids swapped, as the first version of the seed wrote them
LEGACY_ANSWER_COLUMN_MAP: Mapping[str, str] = {
    "id": "id",
    "sh_id": "q_id",
    "question_id": "sh_id",
    "choice_id": "choice_id",
}


@dataclass
class SeedDataset:
    """In-memory rows for every seeded entity, keyed like the seed steps."""

    shareholders: List[Row] = field(default_factory=list)
    questions: List[Row] = field(default_factory=list)
    choices: List[Row] = field(default_factory=list)
    answers: List[Row] = field(default_factory=list)
    users: List[Row] = field(default_factory=list)
    customers: List[Row] = field(default_factory=list)
    invoices: List[Row] = field(default_factory=list)
    revenue: List[Row] = field(default_factory=list)

    @classmethod
    def demo(cls) -> "SeedDataset":
        return cls(
            shareholders=list(placeholder_data.shareholders),
            questions=list(placeholder_data.questions),
            choices=list(placeholder_data.question_choices),
            answers=list(placeholder_data.shareholder_question_answers),
            users=list(placeholder_data.users),
            customers=list(placeholder_data.customers),
            invoices=list(placeholder_data.invoices),
            revenue=list(placeholder_data.revenue),
        )

    def rows_for(self, name: str) -> List[Row]:
        return getattr(self, name)


class SeedOutcome(str, Enum):
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


@dataclass
class SeedResult:
    outcome: SeedOutcome
    counts: Dict[str, int] = field(default_factory=dict)
    error: Optional[BaseException] = None

    @property
    def committed(self) -> bool:
        return self.outcome is SeedOutcome.COMMITTED


@dataclass(frozen=True)
class SeedStep:
    """One seeded entity: target model, upsert conflict key and row preparation."""

    name: str
    model: type
    conflict_key: str
    prepare: Callable[[Row], Row]
    depends_on: Tuple[str, ...] = ()
    needs_uuid: bool = True

    @property
    def table(self) -> Table:
        return self.model.__table__


def _pick(*columns: str) -> Callable[[Row], Row]:
    def prepare(row: Row) -> Row:
        return {column: row[column] for column in columns}

    return prepare


def _as_date(value: Any) -> dt.date:
    if isinstance(value, dt.date):
        return value
    return dt.date.fromisoformat(value)


def _prepare_account(row: Row) -> Row:
    return {
        "id": row["id"],
        "name": row["name"],
        "email": row["email"],
        "password": get_password_hash(row["password"]),
    }


def _answer_column_map() -> Mapping[str, str]:
    return LEGACY_ANSWER_COLUMN_MAP if SEED_ANSWERS_LEGACY_MAPPING else ANSWER_COLUMN_MAP


def _prepare_answer(row: Row) -> Row:
    prepared = {column: row[key] for column, key in _answer_column_map().items()}
    prepared["answer_time"] = dt.datetime.now(dt.timezone.utc)
    return prepared


def _prepare_invoice(row: Row) -> Row:
    return {
        "id": row["id"],
        "customer_id": row["customer_id"],
        "amount": row["amount"],
        "status": row["status"],
        "date": _as_date(row["date"]),
    }


SEED_STEPS: Tuple[SeedStep, ...] = (
    SeedStep("shareholders", models.ShareholderModel, "id", _prepare_account),
    SeedStep("questions", models.QuestionModel, "id", _pick("id", "question", "is_active")),
    SeedStep("choices", models.ChoiceModel, "id", _pick("id", "question_id", "choice"), depends_on=("questions",)),
    SeedStep(
        "answers",
        models.AnswerModel,
        "id",
        _prepare_answer,
        depends_on=("shareholders", "questions", "choices"),
    ),
    SeedStep("users", models.UserModel, "id", _prepare_account),
    SeedStep("customers", models.CustomerModel, "id", _pick("id", "name", "email", "image_url")),
    SeedStep("invoices", models.InvoiceModel, "id", _prepare_invoice, depends_on=("customers",)),
    SeedStep("revenue", models.RevenueModel, "month", _pick("month", "revenue"), needs_uuid=False),
)


def resolve_order(steps: Sequence[SeedStep]) -> List[SeedStep]:
    """Order `steps` so every step runs after the steps it depends on.

    Among the steps that are ready, the one declared first wins, so an already
    consistent declaration order is kept as is.
    """
    by_name = {step.name: step for step in steps}
    if len(by_name) != len(steps):
        raise SeedConfigurationError("Seed step names must be unique")
    for step in steps:
        for dep in step.depends_on:
            if dep not in by_name:
                raise SeedConfigurationError(f"Seed step '{step.name}' depends on unknown step '{dep}'")

    ordered: List[SeedStep] = []
    done: set = set()
    pending = list(steps)
    while pending:
        ready = next((s for s in pending if all(dep in done for dep in s.depends_on)), None)
        if ready is None:
            names = ", ".join(s.name for s in pending)
            raise SeedConfigurationError(f"Seed steps have a dependency cycle: {names}")
        pending.remove(ready)
        done.add(ready.name)
        ordered.append(ready)
    return ordered


def prepare_rows(rows: Sequence[Row], prepare: Callable[[Row], Row], max_workers: Optional[int] = None) -> List[Row]:
    """Run `prepare` over all rows concurrently and wait for every one of them.

    Results keep the input order. If any row fails, its exception is raised
    after the batch has drained and no rows are returned.
    """
    if not rows:
        return []
    with ThreadPoolExecutor(max_workers=max_workers or SEED_WORKERS) as pool:
        return list(pool.map(prepare, rows))


def _insert_ignoring_conflicts(conn: Connection, table: Table, conflict_key: str):
    dialect = conn.dialect.name
    if dialect == "postgresql":
        stmt = postgresql.insert(table)
    elif dialect == "sqlite":
        stmt = sqlite.insert(table)
    else:
        raise SeedError(f"Seeding is not supported on '{dialect}' databases")
    return stmt.on_conflict_do_nothing(index_elements=[conflict_key])


def _ensure_uuid_support(conn: Connection) -> None:
    if conn.dialect.name == "postgresql":
        conn.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))


def _run_step(conn: Connection, step: SeedStep, rows: Sequence[Row]) -> int:
    if step.needs_uuid:
        _ensure_uuid_support(conn)
    step.table.create(bind=conn, checkfirst=True)

    prepared = prepare_rows(rows, step.prepare)
    if prepared:
        conn.execute(_insert_ignoring_conflicts(conn, step.table, step.conflict_key), prepared)
    logger.info("Seeded %s: %d row(s) submitted", step.name, len(prepared))
    return len(prepared)


def seed_database(
    db: Session,
    dataset: Optional[SeedDataset] = None,
    steps: Sequence[SeedStep] = SEED_STEPS,
) -> SeedResult:
    """Seed every entity of `dataset` (the demo data by default) in one transaction.

    Safe to call repeatedly: rows whose key already exists are skipped, never
    updated. A `SeedConfigurationError` for an invalid step graph is raised
    before anything touches the database; every other failure rolls back the
    transaction and comes back as a `rolled_back` result carrying the error.
    """
    if dataset is None:
        dataset = SeedDataset.demo()
    ordered = resolve_order(steps)

    counts: Dict[str, int] = {}
    try:
        conn = db.connection()
        for step in ordered:
            counts[step.name] = _run_step(conn, step, dataset.rows_for(step.name))
        db.commit()
    except Exception as exc:
        db.rollback()
        logger.exception("Seeding failed at step '%s'; transaction rolled back", _current_step(ordered, counts))
        return SeedResult(SeedOutcome.ROLLED_BACK, error=exc)

    logger.info("Database seeded: %s", counts)
    return SeedResult(SeedOutcome.COMMITTED, counts=counts)


def _current_step(ordered: Sequence[SeedStep], counts: Mapping[str, int]) -> str:
    for step in ordered:
        if step.name not in counts:
            return step.name
    return "commit"


__all__ = [
    "ANSWER_COLUMN_MAP",
    "LEGACY_ANSWER_COLUMN_MAP",
    "SEED_STEPS",
    "SeedDataset",
    "SeedOutcome",
    "SeedResult",
    "SeedStep",
    "prepare_rows",
    "resolve_order",
    "seed_database",
]
