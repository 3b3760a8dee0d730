"""SQLAlchemy models for the VoteHub backend.

Models implemented:
- ShareholderModel
- QuestionModel
- ChoiceModel
- AnswerModel
- UserModel
- CustomerModel
- InvoiceModel
- RevenueModel

Identifiers are uuid strings generated on the Python side when a row does not
bring its own. Raw SQL inserts without an id fall back to a server default:
`uuid_generate_v4()` from the uuid-ossp extension on PostgreSQL, random hex
on other databases. No foreign keys are declared: `choices.question_id`,
`answers.*_id` and `invoices.customer_id` are plain columns and referential
order is handled by the seeder.

Uses SQLAlchemy 2.0 typing (Mapped, mapped_column) and the declarative Base from `votehub.database`.
"""

from __future__ import annotations

import uuid
import datetime as dt

from sqlalchemy import Date, DateTime, Integer, String, Text
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.expression import FunctionElement

from votehub.database import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class generated_uuid(FunctionElement):
    type = String()
    inherit_cache = True


@compiles(generated_uuid)
def _generated_uuid_default(element, compiler, **kw):
    return "(lower(hex(randomblob(16))))"


@compiles(generated_uuid, "postgresql")
def _generated_uuid_postgresql(element, compiler, **kw):
    return "uuid_generate_v4()"


class ShareholderModel(Base):
    __tablename__ = "shareholders"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id, server_default=generated_uuid())
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<Shareholder id={self.id} email={self.email}>"


class QuestionModel(Base):
    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id, server_default=generated_uuid())
    question: Mapped[str] = mapped_column(String(255), nullable=False)
    # Boolean stored as integer (1 = active)
    is_active: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Question id={self.id} active={self.is_active}>"


class ChoiceModel(Base):
    __tablename__ = "choices"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id, server_default=generated_uuid())
    question_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    choice: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Choice id={self.id} question_id={self.question_id}>"


class AnswerModel(Base):
    __tablename__ = "answers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id, server_default=generated_uuid())
    sh_id: Mapped[str] = mapped_column(String(64), nullable=False)
    question_id: Mapped[str] = mapped_column(String(64), nullable=False)
    choice_id: Mapped[str] = mapped_column(String(255), nullable=False)
    answer_time: Mapped[dt.datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<Answer id={self.id} sh_id={self.sh_id} question_id={self.question_id}>"


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id, server_default=generated_uuid())
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<User id={self.id} email={self.email}>"


class CustomerModel(Base):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id, server_default=generated_uuid())
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Customer id={self.id} name={self.name}>"


class InvoiceModel(Base):
    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id, server_default=generated_uuid())
    customer_id: Mapped[str] = mapped_column(String(64), index=True, nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:
        return f"<Invoice id={self.id} customer_id={self.customer_id} status={self.status}>"


class RevenueModel(Base):
    __tablename__ = "revenue"

    # The only table without a generated id; the month code is the unique key
    month: Mapped[str] = mapped_column(String(4), primary_key=True)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Revenue month={self.month} revenue={self.revenue}>"


__all__ = [
    "Base",
    "ShareholderModel",
    "QuestionModel",
    "ChoiceModel",
    "AnswerModel",
    "UserModel",
    "CustomerModel",
    "InvoiceModel",
    "RevenueModel",
]
