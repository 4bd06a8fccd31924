import re
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from justmyluck.features.signup.models.subscriber import Subscriber
from justmyluck.features.signup.schemas.subscribe import SignupOutcome, SignupResult
from justmyluck.features.signup.utils.emailer import SignupNotifier
from justmyluck.platform.exceptions import StorageError, ValidationError
from justmyluck.platform.logger import get_logger
from justmyluck.platform.services.background import BestEffortTasks

logger = get_logger("signup_service")

DEFAULT_SOURCE = "site"

# local@domain.tld with no whitespace; no TLD length or reserved domain checks.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def coerce_text(value: Any) -> Optional[str]:
    """
    Scalar JSON values as text, with booleans spelled `true`/`false`.
    Lists, objects and other structures give None.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def normalize_email(value: Any) -> str:
    if not value:
        return ""
    text = coerce_text(value)
    if text is None:
        raise ValidationError(f"Email must be a string, got {type(value).__name__}")
    return text.strip().lower()


def normalize_source(value: Any) -> str:
    text = coerce_text(value) if value else None
    return (text or DEFAULT_SOURCE).strip()


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2025-01-01T00:00:00.000Z"""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SubscriberRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert_if_absent(self, email: str, source: str, created_at: str) -> bool:
        """
        Insert a subscriber unless the email is already stored.

        Returns True when a row was created. A conflict on the email constraint
        is resolved by the store itself, so concurrent inserts for one address
        leave exactly one row. Any other failure is raised as StorageError.
        """
        stmt = (
            sqlite_insert(Subscriber.__table__)
            .values(email=email, source=source, created_at=created_at)
            .on_conflict_do_nothing(index_elements=["email"])
        )
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise StorageError(str(e)) from e
        return result.rowcount > 0


class SignupService:
    """
    Records interested visitors.

    The store and the notifier are passed in; the notifier is optional and is
    only ever run as a best-effort side task, so its outcome never reaches the
    caller.
    """

    def __init__(
        self,
        repository: SubscriberRepository,
        side_tasks: BestEffortTasks,
        notifier: Optional[SignupNotifier] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repository = repository
        self.side_tasks = side_tasks
        self.notifier = notifier
        self.clock = clock

    async def submit_signup(self, email: Any, source: Any = None) -> SignupResult:
        email = normalize_email(email)
        source = normalize_source(source)

        if not is_valid_email(email):
            raise ValidationError(f"Rejected email {email!r}")

        try:
            inserted = await self.repository.insert_if_absent(
                email, source, format_timestamp(self.clock())
            )
        except StorageError:
            logger.exception(f"Failed to store signup for {email}")
            raise

        outcome = SignupOutcome.CREATED if inserted else SignupOutcome.DUPLICATE
        logger.info(f"Signup {outcome.value}: {email} ({source})")

        if self.notifier is not None:
            self.side_tasks.add(self.notifier.notify, email, source)

        return SignupResult(outcome=outcome, email=email, source=source)
