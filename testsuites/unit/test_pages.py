import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework import DataIntegrityError, exact_text
from testsuites.ui_testing.pages import (
    AuthenticatedPage,
    CartPage,
    CheckoutCompletePage,
    CheckoutInfoPage,
    CheckoutOverviewPage,
    InventoryDetailsPage,
    InventoryPage,
    LoginPage,
    SortOption,
)


# ================================================================================
# Login
# ================================================================================

@pytest.mark.asyncio
async def test_login_fills_and_submits(session, fake_page):
    for locator in (LoginPage.USERNAME_INPUT, LoginPage.PASSWORD_INPUT, LoginPage.LOGIN_BUTTON):
        fake_page.set_element(locator)

    await LoginPage(session).login("standard_user", "secret_sauce")

    assert fake_page.filled_value(LoginPage.USERNAME_INPUT) == "standard_user"
    assert fake_page.filled_value(LoginPage.PASSWORD_INPUT) == "secret_sauce"
    assert fake_page.was_clicked(LoginPage.LOGIN_BUTTON)


@pytest.mark.asyncio
async def test_login_error_message(session, fake_page):
    login_page = LoginPage(session)
    with pytest.raises(PlaywrightTimeoutError):
        await login_page.get_error_message()

    fake_page.set_element(
        LoginPage.ERROR_MESSAGE, texts=["Epic sadface: Username is required"]
    )
    assert await login_page.is_error_message_visible()
    assert await login_page.get_error_message() == "Epic sadface: Username is required"


@pytest.mark.asyncio
async def test_is_on_login_page_needs_button_and_username(session, fake_page):
    login_page = LoginPage(session)
    fake_page.set_element(LoginPage.LOGIN_BUTTON)
    assert not await login_page.is_on_login_page()

    fake_page.set_element(LoginPage.USERNAME_INPUT)
    assert await login_page.is_on_login_page()
    assert await login_page.is_login_button_visible()


# ================================================================================
# Authenticated shell
# ================================================================================

@pytest.mark.asyncio
async def test_badge_absent_reads_zero(session):
    assert await AuthenticatedPage(session).get_cart_badge_count() == 0


@pytest.mark.asyncio
async def test_badge_count_and_malformed_badge(session, fake_page):
    shell = AuthenticatedPage(session)
    fake_page.set_element(AuthenticatedPage.CART_BADGE, texts=["2"])
    assert await shell.get_cart_badge_count() == 2
    assert await shell.is_cart_badge_visible()

    fake_page.set_element(AuthenticatedPage.CART_BADGE, texts=["two"])
    with pytest.raises(DataIntegrityError):
        await shell.get_cart_badge_count()


@pytest.mark.asyncio
async def test_logout_opens_sidebar_first(session, fake_page):
    shell = AuthenticatedPage(session)
    sidebar = fake_page.set_element(AuthenticatedPage.SIDEBAR_MENU, visible=False)
    fake_page.set_element(
        AuthenticatedPage.HAMBURGER_MENU_BUTTON,
        on_click=lambda: setattr(sidebar, "visible", True),
    )
    fake_page.set_element(AuthenticatedPage.LOGOUT_LINK)

    await shell.logout()

    assert await shell.is_sidebar_visible()
    assert [action for action, _, _ in fake_page.actions] == ["click", "click"]
    assert fake_page.was_clicked(AuthenticatedPage.LOGOUT_LINK)


@pytest.mark.asyncio
async def test_sidebar_that_never_opens_times_out(session, fake_page):
    shell = AuthenticatedPage(session)
    fake_page.set_element(AuthenticatedPage.HAMBURGER_MENU_BUTTON)
    fake_page.set_element(AuthenticatedPage.SIDEBAR_MENU, visible=False)

    with pytest.raises(PlaywrightTimeoutError):
        await shell.open_sidebar_menu()


def test_every_post_login_screen_has_the_shell():
    for page_class in (
        InventoryPage,
        InventoryDetailsPage,
        CartPage,
        CheckoutInfoPage,
        CheckoutOverviewPage,
        CheckoutCompletePage,
    ):
        assert hasattr(page_class, "get_cart_badge_count")
        assert hasattr(page_class, "logout")
    assert not hasattr(LoginPage, "get_cart_badge_count")


# ================================================================================
# Inventory
# ================================================================================

@pytest.mark.asyncio
async def test_inventory_reads_in_display_order(session, fake_page):
    inventory = InventoryPage(session)
    fake_page.set_element(InventoryPage.ITEM_NAMES, texts=["B", "A"])
    fake_page.set_element(InventoryPage.ITEM_PRICES, texts=["$9.99", "$29.99"])
    fake_page.set_element(InventoryPage.INVENTORY_ITEMS, texts=["", ""])

    assert await inventory.get_all_product_names() == ["B", "A"]
    assert await inventory.get_all_product_prices() == [9.99, 29.99]
    assert await inventory.get_inventory_item_count() == 2


@pytest.mark.asyncio
async def test_inventory_rejects_malformed_price(session, fake_page):
    fake_page.set_element(InventoryPage.ITEM_PRICES, texts=["$9.99", "N/A"])

    with pytest.raises(DataIntegrityError):
        await InventoryPage(session).get_all_product_prices()


@pytest.mark.asyncio
async def test_add_product_targets_exact_row(session, fake_page):
    fake_page.set_element(InventoryPage.add_to_cart_button("Sauce Labs Onesie"))

    await InventoryPage(session).add_product_to_cart("Sauce Labs Onesie")

    assert fake_page.was_clicked(InventoryPage.add_to_cart_button("Sauce Labs Onesie"))
    with pytest.raises(PlaywrightTimeoutError):
        await InventoryPage(session).add_product_to_cart("Sauce Labs")


@pytest.mark.asyncio
async def test_sort_option_roundtrip(session, fake_page):
    inventory = InventoryPage(session)
    fake_page.set_element(InventoryPage.SORT_CONTAINER, value="az")

    await inventory.select_sort_option(SortOption.PRICE_DESC)
    assert await inventory.get_selected_sort_option() is SortOption.PRICE_DESC

    await inventory.select_sort_option("lohi")
    assert await inventory.get_selected_sort_option() is SortOption.PRICE_ASC

    with pytest.raises(ValueError):
        await inventory.select_sort_option("price")


@pytest.mark.asyncio
async def test_unknown_selected_sort_is_data_error(session, fake_page):
    fake_page.set_element(InventoryPage.SORT_CONTAINER, value="random")

    with pytest.raises(DataIntegrityError):
        await InventoryPage(session).get_selected_sort_option()


@pytest.mark.asyncio
async def test_inventory_goto_waits_for_container(session, fake_page):
    inventory = InventoryPage(session)
    with pytest.raises(PlaywrightTimeoutError):
        await inventory.goto()

    fake_page.set_element(InventoryPage.INVENTORY_CONTAINER)
    await inventory.goto()
    assert fake_page.navigations[-1] == ("https://www.saucedemo.com/inventory.html", "commit")
    assert await inventory.is_inventory_page_loaded()


@pytest.mark.asyncio
async def test_product_button_text_is_trimmed(session, fake_page):
    fake_page.set_element(InventoryPage.product_button("Sauce Labs Backpack"), texts=[" Remove "])

    assert await InventoryPage(session).get_product_button_text("Sauce Labs Backpack") == "Remove"


@pytest.mark.asyncio
async def test_details_page(session, fake_page):
    details = InventoryDetailsPage(session)
    fake_page.set_element(InventoryDetailsPage.DETAILS_CONTAINER)
    fake_page.set_element(InventoryDetailsPage.PRODUCT_NAME, texts=["Sauce Labs Backpack"])
    fake_page.set_element(InventoryDetailsPage.ADD_TO_CART_BUTTON)

    assert await details.is_loaded()
    assert await details.get_product_name() == "Sauce Labs Backpack"
    await details.click_add_to_cart()
    assert fake_page.was_clicked(InventoryDetailsPage.ADD_TO_CART_BUTTON)
    with pytest.raises(PlaywrightTimeoutError):
        await details.click_remove()


# ================================================================================
# Cart and checkout
# ================================================================================

@pytest.mark.asyncio
async def test_cart_membership_is_exact(session, fake_page):
    cart = CartPage(session)
    fake_page.set_element(CartPage.CART_ITEMS, texts=["", ""])
    fake_page.set_element(
        CartPage.ITEM_NAMES.filter(has_text=exact_text("Sauce Labs Backpack"))
    )

    assert await cart.get_cart_item_count() == 2
    assert await cart.is_product_in_cart("Sauce Labs Backpack")
    assert not await cart.is_product_in_cart("Sauce Labs Bike Light")


@pytest.mark.asyncio
async def test_remove_first_item_uses_first_match(session, fake_page):
    fake_page.set_element(CartPage.REMOVE_BUTTONS, texts=["Remove", "Remove"])

    await CartPage(session).remove_first_item()

    assert fake_page.was_clicked(CartPage.REMOVE_BUTTONS.first())


@pytest.mark.asyncio
async def test_checkout_info_error_absent_is_none(session, fake_page):
    info = CheckoutInfoPage(session)
    assert await info.get_error_message() is None
    assert not await info.is_error_message_visible()

    fake_page.set_element(CheckoutInfoPage.ERROR_MESSAGE, texts=["Error: First Name is required"])
    assert await info.get_error_message() == "Error: First Name is required"


@pytest.mark.asyncio
async def test_fill_checkout_info(session, fake_page):
    info = CheckoutInfoPage(session)
    for locator in (
        CheckoutInfoPage.FIRST_NAME_INPUT,
        CheckoutInfoPage.LAST_NAME_INPUT,
        CheckoutInfoPage.ZIP_CODE_INPUT,
        CheckoutInfoPage.CONTINUE_BUTTON,
    ):
        fake_page.set_element(locator)

    await info.fill_checkout_info("Senior", "Tester", "12345")
    await info.click_continue()

    assert fake_page.filled_value(CheckoutInfoPage.FIRST_NAME_INPUT) == "Senior"
    assert fake_page.filled_value(CheckoutInfoPage.LAST_NAME_INPUT) == "Tester"
    assert fake_page.filled_value(CheckoutInfoPage.ZIP_CODE_INPUT) == "12345"
    assert fake_page.was_clicked(CheckoutInfoPage.CONTINUE_BUTTON)


@pytest.mark.asyncio
async def test_overview_reads(session, fake_page):
    overview = CheckoutOverviewPage(session)
    fake_page.set_element(CheckoutOverviewPage.CART_ITEMS, texts=["", "", ""])
    fake_page.set_element(CheckoutOverviewPage.CART_LIST)
    fake_page.set_element(CheckoutOverviewPage.TOTAL_PRICE_LABEL, texts=["Total: $32.39"])

    assert await overview.get_order_item_count() == 3
    assert await overview.is_summary_visible()
    assert await overview.get_total_price_text() == "Total: $32.39"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "header, expected",
    [
        ("Thank you for your order!", True),
        ("THANK YOU FOR YOUR ORDER", True),
        ("  thank you for your order! ", True),
        ("Thanks", False),
    ],
)
async def test_thank_you_header(session, fake_page, header, expected):
    fake_page.set_element(CheckoutCompletePage.COMPLETE_HEADER, texts=[header])

    assert await CheckoutCompletePage(session).is_thank_you_header_visible() is expected
