# chronicle_e2e/utils/network_helper.py

"""
Network and rendering waits built on the browser's own APIs.

WebDriver cannot see HTTP traffic, so request tracking reads the Resource
Timing buffer (`performance.getEntriesByType('resource')`) through
`execute_script`. Entries expose the URL, start/end times and, on current
Chromium, the response status; they do not expose the HTTP method.
"""

import logging
import time
from typing import Dict, List, Optional

from selenium.common.exceptions import TimeoutException
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.support.ui import WebDriverWait

from chronicle_e2e.config.config import WAIT_FOR_API, WAIT_FOR_NETWORK_IDLE
from chronicle_e2e.utils.wait_helpers import wait_for_document_ready

logger = logging.getLogger(__name__)

_RECENT_REQUESTS_SCRIPT = """
const now = performance.now();
return performance.getEntriesByType('resource').filter(e => e.startTime > now - 100).length;
"""

_RESOURCES_SCRIPT = """
return performance.getEntriesByType('resource').map(e => ({
    name: e.name,
    startTime: e.startTime,
    responseEnd: e.responseEnd,
    responseStatus: (typeof e.responseStatus === 'number') ? e.responseStatus : 0
}));
"""

_CHECKPOINT_SCRIPT = """
if (performance.setResourceTimingBufferSize) { performance.setResourceTimingBufferSize(2000); }
if (performance.clearResourceTimings) { performance.clearResourceTimings(); }
return performance.now();
"""

_FORM_READY_SCRIPT = """
const form = document.querySelector(arguments[0]);
if (!form) return false;
const rect = form.getBoundingClientRect();
if (rect.width === 0 || rect.height === 0) return false;
for (const input of form.querySelectorAll('input:not([type=hidden]), textarea, select')) {
    if (input.readOnly) return false;
}
return true;
"""

_LIST_COUNT_SCRIPT = """
const list = document.querySelector(arguments[0]);
return list ? list.querySelectorAll(':scope > *').length : 0;
"""

_OBSERVE_MUTATIONS_SCRIPT = """
window.__lastMutation = Date.now();
window.__stabilizationComplete = false;
const observer = new MutationObserver(() => { window.__lastMutation = Date.now(); });
observer.observe(document.body, {childList: true, subtree: true, attributes: true});
setTimeout(() => { observer.disconnect(); window.__stabilizationComplete = true; }, 5000);
"""

_MUTATION_STATE_SCRIPT = """
return {
    quietFor: Date.now() - (window.__lastMutation || Date.now()),
    complete: window.__stabilizationComplete || false
};
"""

_ANIMATION_DONE_SCRIPT = """
const element = document.querySelector(arguments[0]);
if (!element) return true;
const style = getComputedStyle(element);
return style.animationName === 'none' || style.transitionDuration === '0s';
"""


def network_checkpoint(driver: WebDriver) -> float:
    """
    Marks "now" on the page clock and empties the Resource Timing buffer.

    Pass the result as `since` to `wait_for_api_endpoint` so requests made
    before the action under test are ignored.
    """
    return driver.execute_script(_CHECKPOINT_SCRIPT) or 0.0


def get_resource_entries(driver: WebDriver) -> List[Dict]:
    return driver.execute_script(_RESOURCES_SCRIPT) or []


def wait_for_page_ready(driver: WebDriver, timeout: float = 10) -> bool:
    ready = wait_for_document_ready(driver, timeout)
    if ready:
        logger.info("DOM ready")
    return ready


def wait_for_api_requests_complete(driver: WebDriver, timeout: float = WAIT_FOR_NETWORK_IDLE) -> bool:
    """
    Waits until no request has started for half a second.

    Apps with background polling may never go quiet; that is logged and
    the caller continues.
    """
    start = time.monotonic()
    last_request = start
    while time.monotonic() - start < timeout:
        if driver.execute_script(_RECENT_REQUESTS_SCRIPT) == 0:
            if time.monotonic() - last_request > 0.5:
                logger.info("API requests completed")
                return True
        else:
            last_request = time.monotonic()
        time.sleep(0.1)

    logger.info("Timeout waiting for API requests, continuing...")
    return False


def _is_success(status) -> bool:
    # 0 means the browser did not report a status (older engines, cross-origin)
    return status == 0 or 200 <= status < 300


def find_completed_request(driver: WebDriver, url_pattern: str, since: float = 0.0) -> Optional[Dict]:
    for entry in get_resource_entries(driver):
        if (url_pattern in entry.get("name", "")
                and entry.get("startTime", 0) >= since
                and entry.get("responseEnd", 0) > 0
                and _is_success(entry.get("responseStatus", 0))):
            return entry
    return None


def wait_for_api_endpoint(driver: WebDriver, url_pattern: str, timeout: float = WAIT_FOR_API,
                          since: float = 0.0, optional: bool = False) -> bool:
    """
    Waits for a finished, successful request whose URL contains `url_pattern`.

    Raises TimeoutException unless `optional`, in which case it returns False.
    """
    logger.info(f"Waiting for API endpoint: {url_pattern}")
    try:
        WebDriverWait(driver, timeout, poll_frequency=0.2).until(
            lambda d: find_completed_request(d, url_pattern, since)
        )
    except TimeoutException:
        logger.info(f"Timeout waiting for API {url_pattern}")
        if optional:
            return False
        raise

    logger.info(f"API endpoint {url_pattern} completed successfully")
    # Give the response a moment to render
    time.sleep(0.5)
    return True


def wait_for_form_ready(driver: WebDriver, form_selector: str, timeout: float = 15):
    """Visible form with no readonly inputs left. Raises TimeoutError otherwise."""
    start = time.monotonic()
    while time.monotonic() - start < timeout:
        if driver.execute_script(_FORM_READY_SCRIPT, form_selector):
            logger.info(f"Form {form_selector} is ready")
            return
        time.sleep(0.2)
    raise TimeoutError(f"Form {form_selector} not ready after {timeout}s")


def wait_for_list_populated(driver: WebDriver, list_selector: str, min_items: int = 1, timeout: float = 15):
    start = time.monotonic()
    while time.monotonic() - start < timeout:
        count = driver.execute_script(_LIST_COUNT_SCRIPT, list_selector) or 0
        if count >= min_items:
            logger.info(f"List {list_selector} populated with {count} items")
            return
        time.sleep(0.2)
    raise TimeoutError(f"List {list_selector} not populated after {timeout}s")


def wait_for_stabilization(driver: WebDriver, min_wait: float = 0.3, max_wait: float = 3,
                           check_interval: float = 0.1) -> bool:
    """Waits until the DOM has had no mutations for 200ms, bounded by `max_wait`."""
    time.sleep(min_wait)
    driver.execute_script(_OBSERVE_MUTATIONS_SCRIPT)

    start = time.monotonic()
    while time.monotonic() - start < max_wait - min_wait:
        state = driver.execute_script(_MUTATION_STATE_SCRIPT) or {}
        if state.get("complete") or state.get("quietFor", 0) > 200:
            logger.info("Page stabilized")
            return True
        time.sleep(check_interval)

    logger.info("Page stabilization timeout, continuing...")
    return False


def wait_for_animation(driver: WebDriver, selector: Optional[str] = None, timeout: float = 1):
    if selector is None:
        time.sleep(min(timeout, 0.5))
        return
    try:
        WebDriverWait(driver, timeout).until(lambda d: d.execute_script(_ANIMATION_DONE_SCRIPT, selector))
    except TimeoutException:
        logger.debug(f"Animation on {selector} still running after {timeout}s")
