# chronicle_e2e/steps/roi_steps.py

from typing import Dict

from chronicle_e2e.data.placeholders import replace_placeholders, replace_placeholders_in_dict
from chronicle_e2e.data.test_data import RoiData, RoiPersonData

from .context import ScenarioContext


def roi_from_table(table: Dict[str, str]) -> RoiData:
    table = replace_placeholders_in_dict(table)
    return RoiData(
        right_type=table.get("rightType", ""),
        term_of_right=table.get("termOfRight", ""),
        fee=table.get("fee", ""),
        certificate_number=table.get("certificateNumber", ""),
        notes=table.get("notes", ""),
    )


def person_from_table(table: Dict[str, str]) -> RoiPersonData:
    table = replace_placeholders_in_dict(table)
    return RoiPersonData(
        first_name=table["firstName"],
        last_name=table["lastName"],
        phone=table.get("phone", ""),
        email=table.get("email", ""),
    )


def navigate_to_all_plots(context: ScenarioContext):
    """When I navigate to all plots page"""
    context.plot_page.click_see_all_plots()


def open_filter_dialog(context: ScenarioContext):
    """When I open the filter dialog"""
    context.plot_page.open_filter()


def select_vacant_filter(context: ScenarioContext):
    """When I select vacant filter"""
    context.plot_page.select_vacant_filter()


def apply_plot_filter(context: ScenarioContext):
    """When I apply the filter plot"""
    context.plot_page.apply_filter()


def expand_section(context: ScenarioContext, section: str):
    """When I expand section {string}"""
    context.plot_page.expand_section(replace_placeholders(section))


def select_plot(context: ScenarioContext, plot_name: str):
    """When I select plot {string}"""
    plot_name = replace_placeholders(plot_name)
    context.plot_page.select_plot(plot_name)
    context.data["selected_plot"] = plot_name


def plot_status_should_be(context: ScenarioContext, expected_status: str):
    """Then the plot status should be {string}"""
    assert context.plot_page.verify_status_changed(expected_status), f"Plot status is not {expected_status}"


def select_first_vacant_plot(context: ScenarioContext):
    """When I select the first vacant plot"""
    context.data["selected_plot"] = context.plot_page.select_first_vacant_plot()


def click_add_roi(context: ScenarioContext):
    """When I click Add ROI button"""
    context.roi_page.click_add_roi()


def fill_roi_form(context: ScenarioContext, table: Dict[str, str]):
    """When I fill ROI form with following details"""
    payment_date = replace_placeholders(table.get("paymentDate", ""))
    context.roi_page.fill_roi_form(roi_from_table(table), payment_date=payment_date)


def add_roi_holder(context: ScenarioContext, table: Dict[str, str]):
    """When I add ROI holder person with following details"""
    context.roi_page.add_roi_holder(person_from_table(table))


def add_roi_applicant(context: ScenarioContext, table: Dict[str, str]):
    """When I add ROI applicant person with following details"""
    context.roi_page.add_roi_applicant(person_from_table(table))


def save_roi(context: ScenarioContext):
    """When I save the ROI"""
    context.roi_page.save_roi()


def should_see_roi_holder(context: ScenarioContext, holder_name: str):
    """Then I should see ROI holder {string} in the ROI tab"""
    holder_name = replace_placeholders(holder_name)
    assert context.roi_page.verify_roi_person(holder_name, "holder"), f"ROI holder {holder_name} not shown"


def should_see_roi_applicant(context: ScenarioContext, applicant_name: str):
    """Then I should see ROI applicant {string} in the ROI tab"""
    applicant_name = replace_placeholders(applicant_name)
    assert context.roi_page.verify_roi_person(applicant_name, "applicant"), (
        f"ROI applicant {applicant_name} not shown"
    )


def should_see_holder_and_applicant(context: ScenarioContext, holder_name: str, applicant_name: str):
    """Then I should see both ROI holder {string} and applicant {string}"""
    assert context.roi_page.verify_roi_holder_and_applicant(
        replace_placeholders(holder_name), replace_placeholders(applicant_name)
    ), "ROI holder and applicant not both shown"


def click_edit_roi(context: ScenarioContext):
    """When I click Edit ROI button"""
    context.roi_page.click_edit_roi()


def should_see_roi_values_in_form(context: ScenarioContext, table: Dict[str, str]):
    """Then the ROI form should show"""
    roi = roi_from_table(table)
    page = context.roi_page
    if roi.fee:
        assert page.verify_fee_in_form(roi.fee), f"Fee {roi.fee} not in form"
    if roi.certificate_number:
        assert page.verify_certificate_in_form(roi.certificate_number), (
            f"Certificate {roi.certificate_number} not in form"
        )
    if roi.notes:
        assert page.verify_notes_in_form(roi.notes), "Notes not in form"


def add_activity_note(context: ScenarioContext, note: str):
    """When I add activity note {string}"""
    context.roi_page.add_activity_note(replace_placeholders(note))


def edit_activity_note(context: ScenarioContext, note: str):
    """When I edit the activity note to {string}"""
    context.roi_page.edit_activity_note(replace_placeholders(note))


def should_see_activity_note(context: ScenarioContext, note: str):
    """Then I should see activity note {string}"""
    assert context.roi_page.has_activity_note(replace_placeholders(note)), f"Activity note {note!r} not shown"


def navigate_to_add_roi_for_selected_plot(context: ScenarioContext):
    """When I open the add ROI form for the selected plot"""
    context.plot_page.navigate_to_add_roi(context.data["selected_plot"])
