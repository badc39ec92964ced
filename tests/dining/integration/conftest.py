import pytest
from dining.api.errors import register_access_handlers
from dining.api.routes import order_router, payment_method_router, restaurant_router, shared_cart_router
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.integrations.fastapi import register_exception_handlers


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(order_router)
    app.include_router(shared_cart_router)
    app.include_router(restaurant_router)
    app.include_router(payment_method_router)
    register_exception_handlers(app)
    register_access_handlers(app)
    return TestClient(app)


@pytest.fixture()
def headers():
    def _headers(user):
        values = {
            "X-User-Id": user.id,
            "X-User-Role": user.role.value,
            "X-User-Country": user.country.value,
        }
        if user.email:
            values["X-User-Email"] = user.email
        return values

    return _headers
