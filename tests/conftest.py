import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _storefront_domain(request):
    """Initialize the storefront domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain
    from storefront.notification.channel import reset_channels

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    reset_channels()
    ctx.pop()


# ---------------------------------------------------------------------------
# Principals
# ---------------------------------------------------------------------------
@pytest.fixture()
def admin():
    from storefront.identity.principal import ADMIN, Principal

    return Principal(id="admin-1", email="admin@example.com", roles=frozenset({ADMIN}))


@pytest.fixture()
def customer():
    from storefront.identity.principal import CUSTOMER, Principal

    return Principal(id="customer-1", email="shopper@example.com", roles=frozenset({CUSTOMER}))


@pytest.fixture()
def guest():
    from storefront.identity.principal import Principal

    return Principal(id="guest-1")


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------
@pytest.fixture()
def sms():
    from storefront.notification.channel.fakes import FakeSMSAdapter

    return FakeSMSAdapter()


@pytest.fixture()
def email():
    from storefront.notification.channel.fakes import FakeEmailAdapter

    return FakeEmailAdapter()


@pytest.fixture()
def dispatcher(sms, email):
    """A single-worker dispatcher wired to fake adapters.

    Tests call ``dispatcher.shutdown()`` to wait for queued deliveries.
    """
    from storefront.notification.dispatcher import NotificationDispatcher

    dispatcher = NotificationDispatcher(max_workers=1, sms=sms, email=email)
    yield dispatcher
    dispatcher.shutdown(wait=True)


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
@pytest.fixture()
def verifier():
    from storefront.identity.fake_verifier import FakeTokenVerifier

    return FakeTokenVerifier(
        {
            "admin-token": {"uid": "admin-1", "email": "admin@example.com", "roles": ["admin"]},
            "customer-token": {"uid": "customer-1", "email": "shopper@example.com", "roles": ["customer"]},
            "guest-token": {"uid": "guest-1"},
        }
    )


@pytest.fixture()
def client(verifier, dispatcher):
    """Storefront routers behind fake token verification and notification adapters."""
    from fastapi import FastAPI
    from fastapi.testclient import TestClient
    from storefront.api import (
        category_router,
        customer_router,
        order_router,
        product_router,
        register_exception_handlers,
    )
    from storefront.api.dependencies import get_order_placement, get_resolver
    from storefront.identity.resolver import PrincipalResolver
    from storefront.order.placement import OrderPlacement

    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(category_router)
    app.include_router(product_router)
    app.include_router(order_router)
    app.include_router(customer_router)

    app.dependency_overrides[get_resolver] = lambda: PrincipalResolver(verifier)
    app.dependency_overrides[get_order_placement] = lambda: OrderPlacement(dispatcher=dispatcher)
    return TestClient(app)
