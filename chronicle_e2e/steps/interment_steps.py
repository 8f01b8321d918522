# chronicle_e2e/steps/interment_steps.py

from typing import Dict, Optional

from chronicle_e2e.data.placeholders import replace_placeholders, replace_placeholders_in_dict
from chronicle_e2e.data.test_data import IntermentData

from .context import ScenarioContext

# Scenario table keys for the record fields; anything else is an optional form field
_TABLE_KEYS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "middleName": "middle_name",
    "intermentType": "interment_type",
    "dateOfBirth": "date_of_birth",
    "dateOfDeath": "date_of_death",
    "intermentDate": "interment_date",
}
_REQUIRED_KEYS = ("firstName", "lastName", "intermentType")
_OPTIONAL_KEYS = {
    "title": "title",
    "age": "age",
    "causeOfDeath": "cause_of_death",
    "occupation": "occupation",
    "intermentDepth": "interment_depth",
}


def interment_from_table(table: Dict[str, str]):
    """Splits a key/value scenario table into an IntermentData and the optional fields."""
    missing = [key for key in _REQUIRED_KEYS if key not in table]
    if missing:
        raise ValueError(f"Interment table is missing required column(s): {', '.join(missing)}")

    table = replace_placeholders_in_dict(table)
    record = {field: table[key] for key, field in _TABLE_KEYS.items() if key in table}
    optional = {field: table[key] for key, field in _OPTIONAL_KEYS.items() if table.get(key)}
    return IntermentData(**record), optional


def click_add_interment(context: ScenarioContext):
    """When I click Add Interment button"""
    context.interment_page.click_add_interment()


def fill_interment_form(context: ScenarioContext, table: Dict[str, str]):
    """When I fill interment form with following details"""
    data, optional = interment_from_table(table)
    context.data["deceased_name"] = data.deceased_name
    context.interment_page.fill_interment_form(data, optional)


def save_interment(context: ScenarioContext):
    """When I save the Interment"""
    context.interment_page.save_interment()


def should_see_deceased(context: ScenarioContext, deceased_name: str):
    """Then I should see deceased {string} in the Interment tab"""
    context.interment_page.verify_deceased_in_tab(replace_placeholders(deceased_name))


def should_see_interment_type(context: ScenarioContext, interment_type: str):
    """Then I should see interment type {string}"""
    context.interment_page.verify_interment_type(replace_placeholders(interment_type))


def add_interment_applicant(context: ScenarioContext):
    """When I add interment applicant"""
    context.interment_page.add_interment_applicant()


def add_next_of_kin(context: ScenarioContext):
    """When I add next of kin"""
    context.interment_page.add_next_of_kin()


def click_edit_interment(context: ScenarioContext):
    """When I click Edit Interment button"""
    context.interment_page.click_edit_interment()


def update_interment_form(context: ScenarioContext, table: Dict[str, str]):
    """When I update interment form with following details"""
    table = replace_placeholders_in_dict(table)
    middle_name: Optional[str] = table.get("middleName")
    context.interment_page.update_interment_form(
        first_name=table.get("firstName", ""),
        last_name=table.get("lastName", ""),
        middle_name=middle_name,
        interment_type=table.get("intermentType", ""),
    )
