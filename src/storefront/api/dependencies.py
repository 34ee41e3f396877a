"""FastAPI dependencies: principal resolution and order placement wiring."""

from fastapi import Depends, Header

from storefront.identity.principal import Principal
from storefront.identity.resolver import PrincipalResolver
from storefront.identity.signed_token import SignedTokenVerifier
from storefront.notification.dispatcher import get_dispatcher
from storefront.order.placement import OrderPlacement
from storefront.utils import settings


def get_resolver() -> PrincipalResolver:
    return PrincipalResolver(SignedTokenVerifier(settings.token_secret()))


def get_principal(
    authorization: str | None = Header(default=None),
    resolver: PrincipalResolver = Depends(get_resolver),
) -> Principal:
    return resolver.resolve(authorization)


def get_order_placement() -> OrderPlacement:
    return OrderPlacement(dispatcher=get_dispatcher())
