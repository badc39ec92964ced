"""FastAPI routes for the Dining domain: orders, shared carts, restaurants and payment methods."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from dining.access.user import User
from dining.api.requester import current_user
from dining.api.schemas import (
    AddPaymentMethodRequest,
    AddSharedCartItemsRequest,
    CreateSharedCartRequest,
    MenuItemResponse,
    OrderResponse,
    PaymentMethodResponse,
    PlaceOrderRequest,
    RegisterRestaurantRequest,
    RestaurantIdResponse,
    RestaurantResponse,
    SharedCartResponse,
)
from dining.menu.catalogue import list_restaurants, menu_of
from dining.menu.registration import RegisterRestaurant
from dining.order.order import Order
from dining.order.placement import PlaceOrder
from dining.order.queries import get_order, list_orders
from dining.order.settlement import CancelOrder, CheckoutOrder
from dining.payment_method.payment_method import PaymentMethod
from dining.payment_method.queries import list_payment_methods
from dining.payment_method.registration import AddPaymentMethod
from dining.shared_cart.items import AddItemsToSharedCart
from dining.shared_cart.management import CreateSharedCart, DeleteSharedCart
from dining.shared_cart.queries import (
    describe_shared_cart,
    get_shared_cart_by_code,
    list_my_shared_carts,
    list_shared_carts,
)
from dining.shared_cart.shared_cart import SharedCart


def _requester_fields(user: User) -> dict:
    return {
        "user_id": user.id,
        "user_role": user.role.value,
        "user_country": user.country.value,
    }


def _order_response(order_id) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse(**order.snapshot())


def _shared_cart_response(cart) -> SharedCartResponse:
    return SharedCartResponse(**describe_shared_cart(cart))


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest, user: User = Depends(current_user)) -> OrderResponse:
    command = PlaceOrder(
        **_requester_fields(user),
        items=json.dumps([item.model_dump() for item in body.items]),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return _order_response(order_id)


@order_router.get("", response_model=list[OrderResponse])
async def get_orders(user: User = Depends(current_user)) -> list[OrderResponse]:
    return [OrderResponse(**order.snapshot()) for order in list_orders(user)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_single_order(order_id: str, user: User = Depends(current_user)) -> OrderResponse:
    return OrderResponse(**get_order(order_id, user).snapshot())


@order_router.put("/{order_id}/checkout", response_model=OrderResponse)
async def checkout_order(order_id: str, user: User = Depends(current_user)) -> OrderResponse:
    command = CheckoutOrder(order_id=order_id, **_requester_fields(user))
    current_domain.process(command, asynchronous=False)
    return _order_response(order_id)


@order_router.put("/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(order_id: str, user: User = Depends(current_user)) -> OrderResponse:
    command = CancelOrder(order_id=order_id, **_requester_fields(user))
    current_domain.process(command, asynchronous=False)
    return _order_response(order_id)


# ---------------------------------------------------------------------------
# Shared Cart Router
# ---------------------------------------------------------------------------
shared_cart_router = APIRouter(prefix="/shared-carts", tags=["shared-carts"])


@shared_cart_router.post("", status_code=201, response_model=SharedCartResponse)
async def create_shared_cart(body: CreateSharedCartRequest, user: User = Depends(current_user)) -> SharedCartResponse:
    command = CreateSharedCart(
        **_requester_fields(user),
        user_email=user.email,
        country=body.country.value,
        items=json.dumps([item.model_dump() for item in body.items]),
    )
    cart_id = current_domain.process(command, asynchronous=False)
    return _shared_cart_response(current_domain.repository_for(SharedCart).get(cart_id))


@shared_cart_router.get("", response_model=list[SharedCartResponse])
async def get_shared_carts(user: User = Depends(current_user)) -> list[SharedCartResponse]:
    return [_shared_cart_response(cart) for cart in list_shared_carts(user)]


@shared_cart_router.get("/mine", response_model=list[SharedCartResponse])
async def get_my_shared_carts(user: User = Depends(current_user)) -> list[SharedCartResponse]:
    return [_shared_cart_response(cart) for cart in list_my_shared_carts(user.id)]


@shared_cart_router.get("/code/{code}", response_model=SharedCartResponse)
async def get_shared_cart(code: str, user: User = Depends(current_user)) -> SharedCartResponse:
    return _shared_cart_response(get_shared_cart_by_code(code, user))


@shared_cart_router.post("/{shared_cart_id}/items", response_model=SharedCartResponse)
async def add_shared_cart_items(
    shared_cart_id: str, body: AddSharedCartItemsRequest, user: User = Depends(current_user)
) -> SharedCartResponse:
    command = AddItemsToSharedCart(
        shared_cart_id=shared_cart_id,
        **_requester_fields(user),
        items=json.dumps([item.model_dump() for item in body.items]),
    )
    current_domain.process(command, asynchronous=False)
    return _shared_cart_response(current_domain.repository_for(SharedCart).get(shared_cart_id))


@shared_cart_router.delete("/{shared_cart_id}", response_model=SharedCartResponse)
async def delete_shared_cart(shared_cart_id: str, user: User = Depends(current_user)) -> SharedCartResponse:
    command = DeleteSharedCart(shared_cart_id=shared_cart_id, user_id=user.id)
    snapshot = current_domain.process(command, asynchronous=False)
    return _shared_cart_response(snapshot)


# ---------------------------------------------------------------------------
# Restaurant Router
# ---------------------------------------------------------------------------
restaurant_router = APIRouter(prefix="/restaurants", tags=["restaurants"])


@restaurant_router.post("", status_code=201, response_model=RestaurantIdResponse)
async def register_restaurant(
    body: RegisterRestaurantRequest, user: User = Depends(current_user)
) -> RestaurantIdResponse:
    command = RegisterRestaurant(
        **_requester_fields(user),
        name=body.name,
        country=body.country.value,
        menu_items=json.dumps([item.model_dump() for item in body.menu_items]),
    )
    restaurant_id = current_domain.process(command, asynchronous=False)
    return RestaurantIdResponse(restaurant_id=restaurant_id)


@restaurant_router.get("", response_model=list[RestaurantResponse])
async def get_restaurants(user: User = Depends(current_user)) -> list[RestaurantResponse]:
    return [
        RestaurantResponse(
            id=str(restaurant.id),
            name=restaurant.name,
            country=restaurant.country,
            menu_items=[
                MenuItemResponse(id=str(item.id), name=item.name, price=item.price, description=item.description)
                for item in menu_of(restaurant.id)
            ],
        )
        for restaurant in list_restaurants(user)
    ]


# ---------------------------------------------------------------------------
# Payment Method Router
# ---------------------------------------------------------------------------
payment_method_router = APIRouter(prefix="/payment-methods", tags=["payment-methods"])


@payment_method_router.post("", status_code=201, response_model=PaymentMethodResponse)
async def add_payment_method(
    body: AddPaymentMethodRequest, user: User = Depends(current_user)
) -> PaymentMethodResponse:
    command = AddPaymentMethod(
        **_requester_fields(user),
        owner_id=body.user_id,
        method_type=body.method_type,
        details=body.details,
    )
    method_id = current_domain.process(command, asynchronous=False)
    return PaymentMethodResponse(**current_domain.repository_for(PaymentMethod).get(method_id).snapshot())


@payment_method_router.get("", response_model=list[PaymentMethodResponse])
async def get_payment_methods(user: User = Depends(current_user)) -> list[PaymentMethodResponse]:
    return [PaymentMethodResponse(**method.snapshot()) for method in list_payment_methods(user)]
