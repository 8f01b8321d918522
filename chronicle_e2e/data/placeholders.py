# chronicle_e2e/data/placeholders.py

"""
`<TEST_*>` placeholders usable in scenario tables and parameters.

Scenario text stays environment-independent; the placeholder is swapped for
the current value from `test_data` right before it is typed into the UI.
"""

import re
from typing import Dict, List

from chronicle_e2e.data.test_data import (
    ADVANCE_SEARCH_DATA,
    CEMETERY,
    INTERMENT_DATA,
    LOGIN_DATA,
    PERSON_DATA,
    PLOT_SEARCH,
    ROI_DATA,
    SEARCH_DATA,
)

PLACEHOLDER_PATTERN = re.compile(r"<TEST_[A-Z_0-9]+>")

_person_add = PERSON_DATA["add"]
_person_delete = PERSON_DATA["delete"]

PLACEHOLDER_MAP: Dict[str, str] = {
    # Login
    "<TEST_EMAIL>": LOGIN_DATA["valid"]["email"],
    "<TEST_PASSWORD>": LOGIN_DATA["valid"]["password"],
    "<TEST_ORG_NAME>": LOGIN_DATA["valid"]["organization_name"],

    # Cemetery & plot
    "<TEST_CEMETERY>": CEMETERY,
    "<TEST_SECTION>": PLOT_SEARCH["section"],
    "<TEST_ROW>": PLOT_SEARCH["row"],
    "<TEST_NUMBER>": PLOT_SEARCH["number"],

    # Advanced search
    "<TEST_ADVANCE_PLOT_ID>": ADVANCE_SEARCH_DATA["plot_id"],
    "<TEST_ADVANCE_PLOT_TYPE>": ADVANCE_SEARCH_DATA["plot_type"],
    "<TEST_ADVANCE_STATUS>": ADVANCE_SEARCH_DATA["status"],

    # Search box
    "<TEST_SEARCH_ROI_HOLDER_NAME>": SEARCH_DATA["roi_holder"]["search_name"],
    "<TEST_SEARCH_ROI_HOLDER_DISPLAY>": SEARCH_DATA["roi_holder"]["display_name"],
    "<TEST_SEARCH_PLOT_ID>": SEARCH_DATA["roi_holder"]["plot_id"],

    # Interment
    "<TEST_INTERMENT_FIRSTNAME>": INTERMENT_DATA["add"].first_name,
    "<TEST_INTERMENT_LASTNAME>": INTERMENT_DATA["add"].last_name,
    "<TEST_INTERMENT_TYPE>": INTERMENT_DATA["add"].interment_type,
    "<TEST_INTERMENT_EDIT_FIRSTNAME>": INTERMENT_DATA["edit"].first_name,
    "<TEST_INTERMENT_EDIT_LASTNAME>": INTERMENT_DATA["edit"].last_name,
    "<TEST_INTERMENT_EDIT_TYPE>": INTERMENT_DATA["edit"].interment_type,

    # ROI
    "<TEST_ROI_RIGHT_TYPE>": ROI_DATA["basic"].right_type,
    "<TEST_ROI_TERM>": ROI_DATA["basic"].term_of_right,
    "<TEST_ROI_FEE>": ROI_DATA["basic"].fee,
    "<TEST_ROI_CERT>": ROI_DATA["basic"].certificate_number,
    "<TEST_ROI_NOTES>": ROI_DATA["basic"].notes,
    "<TEST_ROI_CERT_2>": ROI_DATA["certificates"]["with_person"],
    "<TEST_ROI_CERT_APPLICANT>": ROI_DATA["certificates"]["applicant"],
    "<TEST_ROI_CERT_BOTH>": ROI_DATA["certificates"]["both"],
    "<TEST_ROI_HOLDER_FIRSTNAME>": ROI_DATA["holder"].first_name,
    "<TEST_ROI_HOLDER_LASTNAME>": ROI_DATA["holder"].last_name,
    "<TEST_ROI_HOLDER_PHONE>": ROI_DATA["holder"].phone,
    "<TEST_ROI_HOLDER_EMAIL>": ROI_DATA["holder"].email,
    "<TEST_ROI_APPLICANT_FIRSTNAME>": ROI_DATA["applicant"].first_name,
    "<TEST_ROI_APPLICANT_LASTNAME>": ROI_DATA["applicant"].last_name,
    "<TEST_ROI_APPLICANT_PHONE>": ROI_DATA["applicant"].phone,
    "<TEST_ROI_APPLICANT_EMAIL>": ROI_DATA["applicant"].email,

    # Person - add
    "<TEST_PERSON_FIRSTNAME>": _person_add.first_name,
    "<TEST_PERSON_LASTNAME>": _person_add.last_name,
    "<TEST_PERSON_MIDDLENAME>": _person_add.middle_name,
    "<TEST_PERSON_TITLE>": _person_add.title,
    "<TEST_PERSON_GENDER>": _person_add.gender,
    "<TEST_PERSON_PHONE_M>": _person_add.phone_m,
    "<TEST_PERSON_PHONE_H>": _person_add.phone_h,
    "<TEST_PERSON_PHONE_O>": _person_add.phone_o,
    "<TEST_PERSON_EMAIL>": _person_add.email,
    "<TEST_PERSON_ADDRESS>": _person_add.address,
    "<TEST_PERSON_CITY>": _person_add.city,
    "<TEST_PERSON_STATE>": _person_add.state,
    "<TEST_PERSON_COUNTRY>": _person_add.country,
    "<TEST_PERSON_POSTCODE>": _person_add.post_code,
    "<TEST_PERSON_NOTE>": _person_add.note,

    # Person - edit
    "<TEST_PERSON_LASTNAME_EDITED>": PERSON_DATA["edit"].last_name,

    # Person - delete
    "<TEST_PERSON_DELETE_FIRSTNAME>": _person_delete.first_name,
    "<TEST_PERSON_DELETE_LASTNAME>": _person_delete.last_name,
    "<TEST_PERSON_DELETE_MIDDLENAME>": _person_delete.middle_name,
    "<TEST_PERSON_DELETE_TITLE>": _person_delete.title,
    "<TEST_PERSON_DELETE_GENDER>": _person_delete.gender,
    "<TEST_PERSON_DELETE_PHONE_M>": _person_delete.phone_m,
    "<TEST_PERSON_DELETE_PHONE_H>": _person_delete.phone_h,
    "<TEST_PERSON_DELETE_PHONE_O>": _person_delete.phone_o,
    "<TEST_PERSON_DELETE_EMAIL>": _person_delete.email,
    "<TEST_PERSON_DELETE_ADDRESS>": _person_delete.address,
    "<TEST_PERSON_DELETE_CITY>": _person_delete.city,
    "<TEST_PERSON_DELETE_STATE>": _person_delete.state,
    "<TEST_PERSON_DELETE_COUNTRY>": _person_delete.country,
    "<TEST_PERSON_DELETE_POSTCODE>": _person_delete.post_code,
    "<TEST_PERSON_DELETE_NOTE>": _person_delete.note,
}


def replace_placeholders(value: str) -> str:
    """
    Replaces every known placeholder in `value`.

    >>> replace_placeholders("User <TEST_EMAIL>")  # doctest: +SKIP
    'User faris+astanaorg@chronicle.rip'
    """
    return PLACEHOLDER_PATTERN.sub(lambda match: PLACEHOLDER_MAP.get(match.group(0), match.group(0)), value)


def replace_placeholders_in_dict(table: Dict[str, str]) -> Dict[str, str]:
    """Returns a copy of a key/value table with placeholders replaced in every value."""
    return {key: replace_placeholders(value) for key, value in table.items()}


def get_test_data_value(placeholder: str) -> str:
    """Value for `TEST_EMAIL` or `<TEST_EMAIL>`; unknown keys come back unchanged."""
    key = placeholder if placeholder.startswith("<") else f"<{placeholder}>"
    return PLACEHOLDER_MAP.get(key, placeholder)


def has_placeholder(value: str) -> bool:
    return PLACEHOLDER_PATTERN.search(value) is not None


def list_available_placeholders() -> List[str]:
    return list(PLACEHOLDER_MAP.keys())
