"""Tests for gqltyped.descriptors module."""

import dataclasses

import pytest

from gqltyped.descriptors import (
    TypeDescriptor,
    coerce_descriptor,
    list_of,
    named,
    non_null,
)


class TestTypeDescriptor:
    """Test descriptor construction and shape."""

    def test_nullable_by_default(self) -> None:
        """Test that a descriptor without nullable is nullable."""
        assert TypeDescriptor("String").nullable is True

    def test_named_descriptor(self) -> None:
        """Test a descriptor naming a type directly."""
        descriptor = TypeDescriptor("User", nullable=False)
        assert descriptor.type == "User"
        assert descriptor.is_list is False
        assert descriptor.named_type == "User"

    def test_list_descriptor(self) -> None:
        """Test that a nested descriptor denotes a list."""
        descriptor = TypeDescriptor(TypeDescriptor(TypeDescriptor("Int")))
        assert descriptor.is_list is True
        assert descriptor.named_type == "Int"

    def test_descriptor_is_frozen(self) -> None:
        """Test that descriptors are immutable."""
        descriptor = TypeDescriptor("String")
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.nullable = False  # type: ignore[misc]

    def test_descriptors_compare_by_value(self) -> None:
        """Test structural equality and hashing."""
        left = TypeDescriptor(TypeDescriptor("ID", nullable=False))
        right = TypeDescriptor(TypeDescriptor("ID", nullable=False))
        assert left == right
        assert hash(left) == hash(right)

    def test_rejects_non_name_type(self) -> None:
        """Test that type must be a name or a descriptor."""
        with pytest.raises(TypeError, match="type name or a nested descriptor"):
            TypeDescriptor(42)  # type: ignore[arg-type]

    def test_rejects_empty_name(self) -> None:
        """Test that an empty type name is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            TypeDescriptor("")

    def test_rejects_non_bool_nullable(self) -> None:
        """Test that nullable must be a real bool."""
        with pytest.raises(TypeError, match="nullable must be a bool"):
            TypeDescriptor("String", nullable="yes")  # type: ignore[arg-type]


class TestHelpers:
    """Test descriptor helper functions."""

    def test_named(self) -> None:
        """Test named() with and without nullability."""
        assert named("User") == TypeDescriptor("User")
        assert named("User", nullable=False) == TypeDescriptor("User", nullable=False)

    def test_list_of_name(self) -> None:
        """Test that list_of() wraps a bare name as a nullable element."""
        assert list_of("Int") == TypeDescriptor(TypeDescriptor("Int"))

    def test_list_of_descriptor(self) -> None:
        """Test list_of() around a non-null element."""
        descriptor = list_of(non_null("Int"), nullable=False)
        assert descriptor == TypeDescriptor(
            TypeDescriptor("Int", nullable=False),
            nullable=False,
        )

    def test_non_null_keeps_inner_type(self) -> None:
        """Test that non_null() only changes the outermost level."""
        inner = TypeDescriptor("String")
        assert non_null(list_of(inner)) == TypeDescriptor(inner, nullable=False)


class TestCoerceDescriptor:
    """Test coercion from the mapping form."""

    def test_descriptor_passes_through(self) -> None:
        """Test that a descriptor is returned unchanged."""
        descriptor = TypeDescriptor("ID")
        assert coerce_descriptor(descriptor) is descriptor

    def test_bare_name(self) -> None:
        """Test that a bare name is a nullable named descriptor."""
        assert coerce_descriptor("User") == TypeDescriptor("User")

    def test_missing_nullable_means_nullable(self) -> None:
        """Test the default for an absent nullable key."""
        assert coerce_descriptor({"type": "String"}) == TypeDescriptor("String")

    def test_null_nullable_means_nullable(self) -> None:
        """Test that an explicit None nullable is read as nullable."""
        assert coerce_descriptor({"nullable": None, "type": {"type": "ID"}}) == (
            TypeDescriptor(TypeDescriptor("ID"))
        )

    def test_nested_mapping(self) -> None:
        """Test that nested type mappings become list descriptors."""
        result = coerce_descriptor(
            {"nullable": False, "type": {"type": {"nullable": False, "type": "ID"}}},
        )
        assert result == TypeDescriptor(
            TypeDescriptor(TypeDescriptor("ID", nullable=False)),
            nullable=False,
        )

    def test_nested_descriptor_inside_mapping(self) -> None:
        """Test a mapping wrapping an already-built descriptor."""
        inner = TypeDescriptor("Int", nullable=False)
        assert coerce_descriptor({"type": inner}) == TypeDescriptor(inner)

    def test_missing_type_key(self) -> None:
        """Test that a mapping without 'type' raises KeyError."""
        with pytest.raises(KeyError, match="Missing required 'type' key"):
            coerce_descriptor({"nullable": True})

    def test_rejects_other_values(self) -> None:
        """Test that unsupported values raise TypeError."""
        with pytest.raises(TypeError, match="Expected a TypeDescriptor"):
            coerce_descriptor(["String"])  # type: ignore[arg-type]
