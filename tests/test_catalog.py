from __future__ import annotations

import pytest

from easy_apply.config import ConfigError
from easy_apply.catalog import (
    Locator,
    SelectorCatalog,
    any_visible,
    click_first_match,
    css_union,
    first_visible_match,
    load_catalog,
)
from tests.conftest import FakePage

CANDIDATES = (
    Locator(selector="button.one"),
    Locator(selector="button.two"),
    Locator(text="Apply now"),
)


def test_default_catalog_loads(catalog) -> None:
    assert catalog.apply[0] == Locator(selector='button:has-text("Easily apply")')
    assert len(catalog.progress) == 5
    assert all(c.text for c in catalog.confirmation)
    assert css_union(catalog.job_link) == "a[data-jk], a.tapItem"


def test_first_visible_match_respects_order() -> None:
    page = FakePage(visible={"button.two", "text:Apply now"})
    match = first_visible_match(page, CANDIDATES)
    assert match is not None and match.key == "button.two"


def test_no_match_is_none_not_error() -> None:
    page = FakePage()
    assert first_visible_match(page, CANDIDATES) is None
    assert not any_visible(page, CANDIDATES)
    assert click_first_match(page, CANDIDATES) is False


def test_text_matcher() -> None:
    page = FakePage(visible={"text:Apply now"})
    assert click_first_match(page, CANDIDATES)
    assert page.clicks == ["text:Apply now"]


def test_click_failure_falls_through_to_next_candidate() -> None:
    page = FakePage(visible={"button.one", "button.two"}, broken={"button.one"})
    assert click_first_match(page, CANDIDATES)
    assert page.clicks == ["button.two"]


def test_catalog_from_file(selectors_file) -> None:
    body = "\n".join(
        f"{name}:\n  - 'x-{name}'" for name in (
            "sign_in", "email_input", "password_input", "job_link",
            "apply", "contact_field", "progress",
        )
    )
    path = selectors_file(body + "\nconfirmation:\n  - text: Done\n")
    cat = load_catalog(path)
    assert cat.apply == (Locator(selector="x-apply"),)
    assert cat.confirmation == (Locator(text="Done"),)


def test_catalog_missing_action() -> None:
    with pytest.raises(ConfigError, match="progress"):
        SelectorCatalog.from_mapping({"apply": ["button"]})


def test_catalog_unknown_action() -> None:
    with pytest.raises(ConfigError, match="bogus"):
        SelectorCatalog.from_mapping({"bogus": ["x"]})


def test_catalog_bad_entry() -> None:
    data = {name: ["x"] for name in (
        "sign_in", "email_input", "password_input", "job_link",
        "apply", "contact_field", "progress", "confirmation",
    )}
    data["apply"] = [{"css": "button"}]
    with pytest.raises(ConfigError, match="Bad selector entry"):
        SelectorCatalog.from_mapping(data)


def test_catalog_invalid_yaml(selectors_file) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_catalog(selectors_file("apply: [unclosed\n"))


def test_catalog_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigError, match="Cannot read"):
        load_catalog(tmp_path / "nope.yaml")


@pytest.mark.parametrize("action", ["job_link", "email_input", "password_input"])
def test_text_matcher_rejected_for_css_only_action(action: str) -> None:
    data = {name: ["x"] for name in (
        "sign_in", "email_input", "password_input", "job_link",
        "apply", "contact_field", "progress", "confirmation",
    )}
    data[action] = [{"text": "View job"}]
    with pytest.raises(ConfigError, match=action):
        SelectorCatalog.from_mapping(data)


def test_text_matcher_still_allowed_for_clickable_actions() -> None:
    data = {name: ["x"] for name in (
        "sign_in", "email_input", "password_input", "job_link",
        "apply", "contact_field", "progress", "confirmation",
    )}
    data["apply"] = [{"text": "Easily apply"}]
    cat = SelectorCatalog.from_mapping(data)
    assert cat.apply == (Locator(text="Easily apply"),)
    assert css_union(cat.job_link) == "x"
