"""Tests for GenerateOptions."""

import dataclasses

import pytest

from gql_tsgen.core.config import GenerateOptions, resolve_options


class TestGenerateOptions:

    def test_defaults(self):
        options = GenerateOptions()
        assert options.prefix == ""
        assert options.suffix == ""
        assert options.use_enum_type is False
        assert options.use_interface_type is False
        assert options.strict_null_checks is False
        assert options.output_dir is None

    def test_format_type_name(self):
        assert GenerateOptions(prefix="I", suffix="Dto").format_type_name("User") == "IUserDto"
        assert GenerateOptions().format_type_name("User") == "User"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            GenerateOptions().prefix = "I"

    def test_from_mapping_camel_case(self):
        options = GenerateOptions.from_mapping(
            {"prefix": "I", "useEnumType": True, "strictNullChecks": True, "outputDir": "out"}
        )
        assert options == GenerateOptions(
            prefix="I", use_enum_type=True, strict_null_checks=True, output_dir="out"
        )

    def test_from_mapping_snake_case(self):
        options = GenerateOptions.from_mapping({"use_interface_type": True})
        assert options.use_interface_type is True

    def test_none_values_use_defaults(self):
        assert GenerateOptions.from_mapping({"prefix": None}) == GenerateOptions()

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="useEnums"):
            GenerateOptions.from_mapping({"useEnums": True})

    def test_resolve_options(self):
        options = GenerateOptions(prefix="I")
        assert resolve_options(options) is options
        assert resolve_options(None) == GenerateOptions()
        assert resolve_options({"suffix": "T"}).suffix == "T"
