# chronicle_e2e/steps/person_steps.py

from typing import Dict

from chronicle_e2e.data.placeholders import replace_placeholders, replace_placeholders_in_dict
from chronicle_e2e.data.test_data import PersonData

from .context import ScenarioContext

_TABLE_KEYS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "middleName": "middle_name",
    "title": "title",
    "gender": "gender",
    "phoneM": "phone_m",
    "phoneH": "phone_h",
    "phoneO": "phone_o",
    "email": "email",
    "address": "address",
    "city": "city",
    "state": "state",
    "country": "country",
    "postCode": "post_code",
    "note": "note",
}
_REQUIRED_KEYS = ("firstName", "lastName")


def person_from_table(table: Dict[str, str]) -> PersonData:
    missing = [key for key in _REQUIRED_KEYS if key not in table]
    if missing:
        raise ValueError(f"Person table is missing required column(s): {', '.join(missing)}")

    table = replace_placeholders_in_dict(table)
    return PersonData(**{field: table[key] for key, field in _TABLE_KEYS.items() if key in table})


def navigate_to_advance_table(context: ScenarioContext):
    """When I navigate to the advance table page"""
    context.person_page.navigate_to_advance_table()


def click_persons_tab(context: ScenarioContext):
    """When I click on the PERSONS tab"""
    context.person_page.navigate_to_person_tab()


def click_add_person(context: ScenarioContext):
    """When I click the add person button"""
    context.person_page.click_add_person()


def fill_person_form(context: ScenarioContext, table: Dict[str, str]):
    """When I fill in the person form with:"""
    context.person_page.fill_person_form(person_from_table(table))


def click_save(context: ScenarioContext):
    """When I click the save button"""
    context.person_page.click_save()


def should_see_person_in_first_row(context: ScenarioContext, name: str):
    """Then I should see the person {string} in the first row of the table"""
    context.person_page.verify_person_in_first_row(replace_placeholders(name))


def click_filter_button(context: ScenarioContext):
    """When I click the filter button"""
    context.person_page.click_filter_button()


def fill_filter_form(context: ScenarioContext, first_name: str, last_name: str):
    """When I fill in the filter form with first name {string} and last name {string}"""
    context.person_page.fill_filter_form(replace_placeholders(first_name), replace_placeholders(last_name))


def apply_filter(context: ScenarioContext):
    """When I apply the filter"""
    context.person_page.apply_filter()


def click_first_row(context: ScenarioContext):
    """When I click the first row to open person details"""
    context.person_page.click_first_row()


def click_edit_button(context: ScenarioContext):
    """When I click the edit button"""
    context.person_page.click_edit_button()


def edit_last_name(context: ScenarioContext, last_name: str):
    """When I edit the last name to {string}"""
    context.person_page.edit_person_last_name(replace_placeholders(last_name))


def click_delete(context: ScenarioContext):
    """When I click the delete button"""
    context.person_page.click_delete()


def confirm_deletion(context: ScenarioContext):
    """When I confirm the deletion"""
    context.person_page.confirm_delete()


def person_should_not_be_listed(context: ScenarioContext, name: str):
    """Then the person {string} should not be in the list"""
    context.person_page.verify_person_not_in_list(replace_placeholders(name))
