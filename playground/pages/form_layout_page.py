"""
Form Layouts Page Object.

This page object encapsulates all interactions with the Form Layouts screen,
which stacks five independent form cards (inline, using the grid, basic,
without labels, block) on one page.

Key Concepts Demonstrated:
- Role-based locators where the widget has an accessible name
- Positional XPath where the screen repeats identical widgets
- One intention-revealing method per form card
"""

from __future__ import annotations

import logging
import re

from playwright.sync_api import Page

from playground.locators import DEFAULT_TIMEOUT_MS, ByRole, ByXPath
from playground.pages.base_page import BasePage

logger = logging.getLogger(__name__)

# Every form card has an "Email" input and a submit button, so these paths
# always match several elements and must be pinned to a position.
EMAIL_INPUTS = ByXPath("//input[@placeholder='Email']")
PRIMARY_SUBMIT = ByXPath("//button[@status='primary' and @type='submit']")
SUBMIT_BUTTONS = ByXPath("//button[@type='submit']")


class FormLayoutPage(BasePage):
    """
    Page object for the Forms > Form Layouts screen.

    Provides methods for:
    - Reaching the screen from the side menu
    - Filling and submitting each of the five form cards
    - Reading back the values left in the inline and block forms
    """

    URL_FRAGMENT = "/forms/layouts"

    def __init__(self, page: Page, base_url: str = "", timeout: float = DEFAULT_TIMEOUT_MS):
        super().__init__(page, base_url, timeout)

        # Side menu
        self.forms_menu = self.element(ByRole("link", name="Forms"))
        self.form_layouts_menu = self.element(ByRole("link", name="Form Layouts"))

        # Inline form
        self.inline_name = self.element(ByRole("textbox", name="Jane Doe"))
        self.inline_email = self.element(EMAIL_INPUTS.at(1))
        self.inline_remember = self.element(ByXPath("//span[@class='custom-checkbox']", nth=1))
        self.inline_submit = self.element(PRIMARY_SUBMIT.at(1))

        # Using the grid
        self.grid_email = self.element(ByXPath("//input[@id='inputEmail1']"))
        self.grid_password = self.element(ByXPath("//input[@id='inputPassword2']"))
        self.grid_option_1 = self.element(ByXPath("//span[contains(text(), 'Option 1')]"))
        self.grid_sign_in = self.element(PRIMARY_SUBMIT.at(2))

        # Basic form
        self.basic_email = self.element(ByXPath("//input[@id='exampleInputEmail1']"))
        self.basic_password = self.element(ByXPath("//input[@id='exampleInputPassword1']"))
        self.basic_check_me_out = self.element(ByXPath("//span[text()='Check me out']"))
        self.basic_submit = self.element(ByXPath("//button[@status='danger' and @type='submit']"))

        # Form without labels
        self.recipients = self.element(ByRole("textbox", name="Recipients"))
        self.subject = self.element(ByRole("textbox", name="Subject"))
        self.message = self.element(ByRole("textbox", name="Message"))
        self.send_button = self.element(ByRole("button", name="SEND"))

        # Block form
        self.block_first_name = self.element(ByRole("textbox", name="First Name"))
        self.block_last_name = self.element(ByRole("textbox", name="Last Name"))
        self.block_email = self.element(EMAIL_INPUTS.at(4))
        self.block_website = self.element(ByRole("textbox", name="Website"))
        self.block_submit = self.element(SUBMIT_BUTTONS.at(5))

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate_to_forms_menu(self) -> None:
        """Expand the Forms group of the side menu."""
        with self.navigation("navigate_to_forms_menu", "Forms submenu"):
            self.forms_menu.click()
            self.form_layouts_menu.wait_visible()

    def navigate_to_form_layouts(self) -> None:
        """Open Form Layouts from the expanded Forms submenu."""
        with self.navigation("navigate_to_form_layouts", self.URL_FRAGMENT):
            self.form_layouts_menu.click()
            self.page.wait_for_url(re.compile(re.escape(self.URL_FRAGMENT)), timeout=self.timeout)

    # -------------------------------------------------------------------------
    # Form Actions
    # -------------------------------------------------------------------------

    def fill_inline_form(self, name: str, email: str) -> None:
        logger.info("Filling inline form for %s", name)
        op = "fill_inline_form"
        with self.interaction(op, "name"):
            self.inline_name.fill(name)
        with self.interaction(op, "email"):
            self.inline_email.fill(email)
        with self.interaction(op, "remember me"):
            self.inline_remember.click()
        with self.interaction(op, "submit"):
            self.inline_submit.click()

    def fill_grid_form(self, email: str, password: str) -> None:
        logger.info("Filling grid form for %s", email)
        op = "fill_grid_form"
        with self.interaction(op, "email"):
            self.grid_email.fill(email)
        with self.interaction(op, "password"):
            self.grid_password.fill(password)
        with self.interaction(op, "radio option"):
            self.grid_option_1.scroll_into_view()
            self.grid_option_1.click()
        with self.interaction(op, "sign in"):
            self.grid_sign_in.click()

    def fill_basic_form(self, email: str, password: str) -> None:
        logger.info("Filling basic form for %s", email)
        op = "fill_basic_form"
        with self.interaction(op, "email"):
            self.basic_email.fill(email)
        with self.interaction(op, "password"):
            self.basic_password.fill(password)
        with self.interaction(op, "check me out"):
            self.basic_check_me_out.click()
        with self.interaction(op, "submit"):
            self.basic_submit.click()

    def scroll_to_send(self) -> None:
        """Bring the form without labels into view."""
        with self.interaction("scroll_to_send", "send button"):
            self.send_button.scroll_into_view()

    def fill_without_label_form(self, recipients: str, subject: str, message: str) -> None:
        logger.info("Filling form without labels for %s", recipients)
        op = "fill_without_label_form"
        with self.interaction(op, "recipients"):
            self.recipients.fill(recipients)
        with self.interaction(op, "subject"):
            self.subject.fill(subject)
        with self.interaction(op, "message"):
            self.message.fill(message)
        with self.interaction(op, "send"):
            self.send_button.click()

    def fill_block_form(self, first_name: str, last_name: str, email: str, website: str) -> None:
        """
        Fill and submit the block form.

        Args:
            first_name: Value for "First Name".
            last_name: Value for "Last Name".
            email: Value for the block form's "Email".
            website: Value for "Website".

        Raises:
            InteractionError: If any field or the submit button cannot be used.
        """
        logger.info("Filling block form for %s %s", first_name, last_name)
        op = "fill_block_form"
        with self.interaction(op, "first name"):
            self.block_first_name.fill(first_name)
        with self.interaction(op, "last name"):
            self.block_last_name.fill(last_name)
        with self.interaction(op, "email"):
            self.block_email.fill(email)
        with self.interaction(op, "website"):
            self.block_website.fill(website)
        with self.interaction(op, "submit"):
            self.block_submit.click()

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def inline_form_values(self) -> dict[str, str]:
        return {
            "name": self.inline_name.input_value(),
            "email": self.inline_email.input_value(),
        }

    def block_form_values(self) -> dict[str, str]:
        """Current values of the block form inputs."""
        return {
            "first_name": self.block_first_name.input_value(),
            "last_name": self.block_last_name.input_value(),
            "email": self.block_email.input_value(),
            "website": self.block_website.input_value(),
        }
