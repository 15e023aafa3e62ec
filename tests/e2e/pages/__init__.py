"""
Page Object Models for Playwright E2E Tests

One page object per screen of the shop; each wraps the screen's
selectors behind intention-revealing actions.
"""

from .account_created_page import AccountCreatedPage
from .base_page import BasePage
from .cart_page import CartPage
from .checkout_page import CheckoutPage
from .home_page import HomePage
from .order_success_page import OrderSuccessPage
from .payment_page import PaymentPage
from .product_details_page import ProductDetailsPage
from .products_page import ProductsPage
from .signup_login_page import SignupLoginPage
from .signup_page import SignupPage

__all__ = [
    "BasePage",
    "HomePage",
    "SignupLoginPage",
    "SignupPage",
    "AccountCreatedPage",
    "ProductsPage",
    "ProductDetailsPage",
    "CartPage",
    "CheckoutPage",
    "PaymentPage",
    "OrderSuccessPage",
]
