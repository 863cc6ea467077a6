from __future__ import annotations

import httpx
import pytest
from pydantic import ValidationError

from forge_yourself.adapters.query import encode_options, option_pairs
from forge_yourself.core.domain.enums import Endorsement, ModuleGroup, ReleaseSortOption, SortOption
from forge_yourself.core.domain.options import (
    DeleteModuleParams,
    GetModuleOptions,
    ListModulesOptions,
    ListReleasesOptions,
    QueryOptions,
)
from forge_yourself.core.errors import EncodingError


def _params(path: str) -> list[tuple[str, str]]:
    return httpx.URL(path).params.multi_items()


def test_none_options_return_path_unchanged() -> None:
    assert encode_options("modules?keep=1", None) == "modules?keep=1"


@pytest.mark.parametrize(
    "options",
    [ListModulesOptions(), GetModuleOptions(), ListReleasesOptions(), DeleteModuleParams()],
)
def test_default_options_encode_to_bare_path(options) -> None:
    assert encode_options("modules", options) == "modules"


def test_zero_values_are_omitted() -> None:
    options = ListModulesOptions(
        limit=0,
        offset=0,
        tag="",
        with_tasks=False,
        endorsements=[],
        slugs=[],
        with_minimum_score=0,
    )
    assert option_pairs(options) == []


def test_set_fields_appear_once_under_their_name() -> None:
    options = ListModulesOptions(
        limit=100,
        owner="puppetlabs",
        endorsements=[Endorsement.SUPPORTED],
    )

    pairs = _params(encode_options("modules", options))

    assert sorted(pairs) == sorted(
        [("limit", "100"), ("owner", "puppetlabs"), ("endorsements", "supported")]
    )


def test_collections_encode_as_repeated_parameters() -> None:
    options = ListModulesOptions(
        endorsements=[Endorsement.SUPPORTED, Endorsement.PARTNER],
        module_groups=[ModuleGroup.BASE, ModuleGroup.PE_ONLY],
        slugs=["puppetlabs-stdlib", "puppetlabs-apache"],
    )

    params = httpx.URL(encode_options("modules", options)).params

    assert params.get_list("endorsements") == ["supported", "partner"]
    assert params.get_list("module_groups") == ["base", "pe_only"]
    assert params.get_list("slugs") == ["puppetlabs-stdlib", "puppetlabs-apache"]


def test_booleans_and_enums_use_wire_values() -> None:
    options = ListModulesOptions(sort_by=SortOption.LATEST_RELEASE, with_pdk=True, hide_deprecated=True)

    assert option_pairs(options) == [
        ("sort_by", "latest_release"),
        ("with_pdk", "true"),
        ("hide_deprecated", "true"),
    ]


def test_enum_fields_accept_plain_strings() -> None:
    options = ListReleasesOptions(sort_by="release_date", module_groups=["pe_only"])

    assert options.sort_by is ReleaseSortOption.RELEASE_DATE
    assert option_pairs(options) == [("sort_by", "release_date"), ("module_groups", "pe_only")]


def test_existing_query_is_replaced() -> None:
    assert encode_options("modules?stale=1", GetModuleOptions(with_html=True)) == "modules?with_html=true"


def test_delete_params_encode_reason() -> None:
    path = encode_options("modules/puppetlabs-stdlib", DeleteModuleParams(reason="duplicate"))

    assert _params(path) == [("reason", "duplicate")]


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(ValidationError):
        ListModulesOptions(endorsement="supported")  # type: ignore[call-arg]


class _MappingOptions(QueryOptions):
    filters: dict[str, str] = {}


def test_unencodable_option_value_raises_encoding_error() -> None:
    with pytest.raises(EncodingError, match="filters"):
        option_pairs(_MappingOptions(filters={"os": "linux"}))
