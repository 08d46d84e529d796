"""
Test data for the Swag Labs UI scenarios.

Credentials are the public demo accounts published on the login screen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class User:
    username: str
    password: str


@dataclass(frozen=True)
class Customer:
    first_name: str
    last_name: str
    zip_code: str

    def as_args(self) -> Tuple[str, str, str]:
        return (self.first_name, self.last_name, self.zip_code)


DEFAULT_PASSWORD = "secret_sauce"

USERS: Dict[str, User] = {
    "standard": User("standard_user", DEFAULT_PASSWORD),
    "locked_out": User("locked_out_user", DEFAULT_PASSWORD),
    "problem": User("problem_user", DEFAULT_PASSWORD),
    "performance_glitch": User("performance_glitch_user", DEFAULT_PASSWORD),
    "error": User("error_user", DEFAULT_PASSWORD),
    "visual": User("visual_user", DEFAULT_PASSWORD),
}

INVALID_USER = User("invalid_user", "invalid_password")


class Products:
    BACKPACK = "Sauce Labs Backpack"
    BIKE_LIGHT = "Sauce Labs Bike Light"
    BOLT_T_SHIRT = "Sauce Labs Bolt T-Shirt"
    FLEECE_JACKET = "Sauce Labs Fleece Jacket"
    ONESIE = "Sauce Labs Onesie"
    RED_T_SHIRT = "Test.allTheThings() T-Shirt (Red)"

    ALL: Tuple[str, ...] = (
        BACKPACK,
        BIKE_LIGHT,
        BOLT_T_SHIRT,
        FLEECE_JACKET,
        ONESIE,
        RED_T_SHIRT,
    )


class ErrorMessages:
    LOCKED_OUT_USER = "Epic sadface: Sorry, this user has been locked out."
    INVALID_CREDENTIALS = (
        "Epic sadface: Username and password do not match any user in this service"
    )
    USERNAME_REQUIRED = "Epic sadface: Username is required"
    PASSWORD_REQUIRED = "Epic sadface: Password is required"
    FIRST_NAME_REQUIRED = "First Name is required"
    LAST_NAME_REQUIRED = "Last Name is required"
    POSTAL_CODE_REQUIRED = "Postal Code is required"


CUSTOMERS: Dict[str, Customer] = {
    "default": Customer("Senior", "Tester", "12345"),
    "cancel": Customer("Cancel", "Test", "99999"),
    "back_button": Customer("Back", "Button", "11111"),
    "empty_cart": Customer("Empty", "Cart", "00000"),
}

CATALOG_SIZE = len(Products.ALL)
