from typing import Optional

from fastapi import BackgroundTasks, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from justmyluck.features.signup.services.signup import SignupService, SubscriberRepository
from justmyluck.features.signup.utils.emailer import SignupNotifier, build_notifier
from justmyluck.platform.db.session import get_db
from justmyluck.platform.services.background import BestEffortTasks
from justmyluck.platform.services.email import SMTPTransport


def get_mail_transport(request: Request) -> Optional[SMTPTransport]:
    return request.app.state.mail_transport


def get_notifier(
    request: Request,
    transport: Optional[SMTPTransport] = Depends(get_mail_transport),
) -> Optional[SignupNotifier]:
    return build_notifier(transport, request.app.state.settings)


async def get_signup_service(
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    notifier: Optional[SignupNotifier] = Depends(get_notifier),
) -> SignupService:
    """
    Wires a SignupService for the current request.

    Tests swap the store or the notifier through `app.dependency_overrides`
    on `get_db` and `get_notifier`.
    """
    return SignupService(
        repository=SubscriberRepository(db),
        side_tasks=BestEffortTasks(background_tasks),
        notifier=notifier,
    )
