"""
Tests for accepted field name extraction.

Tests cover:
- Attribute names and aliases as external names
- Excluded fields
- Model classes vs instances
- Non-model schemas
"""

from typing import Annotated

import pytest
from pydantic import AliasChoices, AliasPath, BaseModel, Field

from payload_guard import Rules, UnknownField, decode_strict, get_field_names
from payload_guard.schemas.users import AddressPayload, UserPayload


class AliasedPayload(BaseModel):
    user_name: str = Field("", alias="userName")
    internal_id: str = Field("", exclude=True)
    plain: int = 0
    nickname: str = Field("", validation_alias="nick")


class TestGetFieldNames:
    """Tests for get_field_names()"""

    def test_user_schema_fields(self):
        """Test the reference schema yields exactly its declared names."""
        assert get_field_names(UserPayload) == {"name", "email", "age", "phone", "address"}

    def test_instance_is_unwrapped(self):
        """Test an instance yields the same names as its class."""
        assert get_field_names(UserPayload()) == get_field_names(UserPayload)

    def test_nested_schema_fields(self):
        """Test nested schemas are introspected on their own."""
        assert get_field_names(AddressPayload) == {"city", "zip"}

    def test_aliases_and_excluded_fields(self):
        """Test aliases replace attribute names and excluded fields are skipped."""
        assert get_field_names(AliasedPayload) == {"userName", "plain", "nick"}

    def test_names_are_case_sensitive(self):
        """Test no case variants are added to the accepted set."""
        fields = get_field_names(UserPayload)

        assert "Name" not in fields
        assert "EMAIL" not in fields

    def test_rules_do_not_affect_names(self):
        """Test constraint metadata leaves field names untouched."""
        class Ruled(BaseModel):
            code: Annotated[str, Rules("required", max=4)] = ""

        assert get_field_names(Ruled) == {"code"}

    def test_non_model_schema_returns_empty_set(self):
        """Test non-model schemas accept no fields."""
        assert get_field_names(dict) == set()
        assert get_field_names({"name": "Alice"}) == set()
        assert get_field_names("not a schema") == set()
        assert get_field_names(None) == set()

    def test_result_is_recomputed_per_call(self):
        """Test callers get an independent set every time."""
        first = get_field_names(UserPayload)
        first.add("extraField")

        assert "extraField" not in get_field_names(UserPayload)


class ChoicePayload(BaseModel):
    nickname: str = Field("", validation_alias=AliasChoices("nick", "nickName"))
    city: str = Field("", validation_alias=AliasPath("location", "city"))
    label: str = Field("", validation_alias=AliasChoices("label", AliasPath("meta", 0)))


class TestValidationAliases:
    """Accepted names follow the keys pydantic actually reads"""

    def test_alias_choices_and_paths(self):
        """Test every alias choice and the first element of each path are accepted."""
        assert get_field_names(ChoicePayload) == {"nick", "nickName", "location", "label", "meta"}

    def test_attribute_name_not_accepted_when_aliased(self):
        assert "nickname" not in get_field_names(ChoicePayload)

    @pytest.mark.parametrize("key", ["nick", "nickName"])
    def test_each_choice_decodes(self, key):
        value = decode_strict(ChoicePayload, f'{{"{key}": "x"}}')

        assert value.nickname == "x"

    def test_alias_path_decodes(self):
        value = decode_strict(ChoicePayload, '{"location": {"city": "Boston"}}')

        assert value.city == "Boston"

    def test_attribute_name_rejected(self):
        """Test a key pydantic would silently drop is rejected instead."""
        with pytest.raises(UnknownField) as exc_info:
            decode_strict(ChoicePayload, '{"nickname": "x"}')

        assert exc_info.value.key == "nickname"
