"""
Example values fed to page object operations.

``PlaygroundData`` is an immutable record created once per process; tests
read fields from it and pass them by value. ``random_block_form`` builds
fresh block-form values with Faker for runs that should not depend on
fixed data.
"""

from __future__ import annotations

from dataclasses import dataclass

from faker import Faker


@dataclass(frozen=True)
class PlaygroundData:
    """Static example values for every form and calendar on the site."""

    # inline form
    uname: str = "Jane Doe"
    email: str = "jane.doe@email.com"

    # using the grid
    grid_email: str = "emailkeduaseedoel@gmail.com"
    password: str = "Passwordnyanigh123"

    # basic form
    email_basic: str = "emailbasic@gmail.com"
    pass_basic: str = "passbasic"

    # form without labels
    recipients: str = "dia penerima"
    subject: str = "tolong terima"
    message: str = "ini adalah pesan, untuk memesan pesanan"

    # block form
    first_name: str = "Depan"
    last_name: str = "Belakang"
    email_block_form: str = "depanbelakangnama@gmail.com"
    website: str = "websitenamalengkap.com"

    # common datepicker
    date_common: str = "Dec 31, 2025"

    # datepicker with range
    date_range_start: str = "1"
    date_range_end: str = "31"

    # datepicker with disabled min max values
    date_min_max: str = "31"

    def block_form(self) -> dict[str, str]:
        """Keyword arguments for ``FormLayoutPage.fill_block_form``."""
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email_block_form,
            "website": self.website,
        }


_DEFAULT = PlaygroundData()


def default_data() -> PlaygroundData:
    return _DEFAULT


def random_block_form(fake: Faker | None = None) -> dict[str, str]:
    """
    Generate block-form values with Faker.

    Args:
        fake: Faker instance to draw from; seed it for reproducible values.

    Returns:
        Keyword arguments for ``FormLayoutPage.fill_block_form``.
    """
    fake = fake or Faker()
    return {
        "first_name": fake.first_name(),
        "last_name": fake.last_name(),
        "email": fake.email(),
        "website": fake.domain_name(),
    }
