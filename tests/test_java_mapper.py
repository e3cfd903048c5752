"""Tests for the Java type mapper and mapper selection."""

import pytest

from typemapper.java import JAVA_BOXED_TYPES, JavaTypeMapper
from typemapper.languages import get_type_mapper, supported_languages
from typemapper.mapper import TypeMapper
from typemapper.model import MappingContext, NamedDefinition
from typemapper.scala import ScalaTypeMapper

_DEFAULT = MappingContext(generated_language="java")


class TestJavaWrapping:
    """Test list wrapping and primitive boxing."""

    def test_wrap_into_list(self, java):
        assert java.wrap_into_list(_DEFAULT, "User", False) == "java.util.List<User>"

    def test_wrap_primitive_into_list_boxes(self, java):
        assert java.wrap_into_list(_DEFAULT, "int", True) == "java.util.List<Integer>"

    def test_wrap_super_type_into_list(self, java):
        assert java.wrap_super_type_into_list(_DEFAULT, "Node", False) == "java.util.List<? extends Node>"

    def test_wrap_super_type_boxes(self, java):
        assert java.wrap_super_type_into_list(_DEFAULT, "char", False) == "java.util.List<? extends Character>"

    def test_generic_parameter_round_trip(self, java):
        assert java.get_generic_parameter(java.wrap_into_list(_DEFAULT, "Foo", False)) == "Foo"

    def test_boxed_table_read_only(self, java):
        with pytest.raises(TypeError):
            JAVA_BOXED_TYPES["int"] = "Number"
        assert java.wrap_into_list(_DEFAULT, "int", False) == "java.util.List<Integer>"

    def test_is_primitive(self, java):
        assert java.is_primitive("boolean")
        assert not java.is_primitive("Boolean")
        assert not java.add_model_validation_annotation_for_type("long")
        assert java.add_model_validation_annotation_for_type("String")


class TestJavaReturnTypes:
    """Test return-type rules with Java syntax."""

    def test_nullable_becomes_optional(self, java):
        ctx = MappingContext(generated_language="java", use_optional_for_nullable_return_types=True)
        result = java.wrap_api_return_type_if_required(ctx, NamedDefinition("String", False), "QUERY")
        assert result == "java.util.Optional<String>"

    def test_optional_not_wrapped_again(self, java):
        ctx = MappingContext(generated_language="java", use_optional_for_nullable_return_types=True)
        result = java.wrap_api_return_type_if_required(
            ctx, NamedDefinition("java.util.Optional<String>", False), "QUERY",
        )
        assert result == "java.util.Optional<String>"

    def test_nullable_list_not_optional(self, java):
        ctx = MappingContext(generated_language="java", use_optional_for_nullable_return_types=True)
        result = java.wrap_api_return_type_if_required(
            ctx, NamedDefinition("java.util.List<String>", False), "QUERY",
        )
        assert result == "java.util.List<String>"

    def test_api_return_list_type(self, java):
        ctx = MappingContext(generated_language="java", api_return_list_type="reactor.core.publisher.Flux")
        result = java.wrap_api_return_type_if_required(
            ctx, NamedDefinition("java.util.List<User>", True), "QUERY",
        )
        assert result == "reactor.core.publisher.Flux<User>"

    def test_subscription_boxes_primitive(self, java):
        ctx = MappingContext(generated_language="java", subscription_return_type="org.reactivestreams.Publisher")
        result = java.wrap_api_return_type_if_required(ctx, NamedDefinition("int", True), "SUBSCRIPTION")
        assert result == "org.reactivestreams.Publisher<Integer>"

    def test_api_return_type_boxes_primitive(self, java):
        ctx = MappingContext(generated_language="java", api_return_type="java.util.concurrent.CompletionStage")
        result = java.wrap_api_return_type_if_required(ctx, NamedDefinition("double", True), "MUTATION")
        assert result == "java.util.concurrent.CompletionStage<Double>"

    def test_mandatory_uses_mapped_primitive(self, java):
        ctx = MappingContext(generated_language="java", custom_types_mapping={"Int!": "int"})
        definition = NamedDefinition("Integer", True, graphql_type_name="Int")
        assert java.wrap_api_return_type_if_required(ctx, definition, "QUERY") == "int"

    def test_no_additional_annotations(self, java):
        ctx = MappingContext(enum_self_import_set=frozenset({"Color"}))
        assert java.get_additional_annotations(ctx, "Color") == []

    def test_jackson_resolver_annotation(self, java):
        assert java.get_jackson_resolver_type_id_annotation("com.example.") == (
            "com.fasterxml.jackson.databind.annotation.JsonTypeIdResolver("
            "com.example.GraphqlJacksonTypeIdResolver.class)"
        )


class TestGetTypeMapper:
    """Test strategy selection by language name."""

    def test_scala(self):
        assert isinstance(get_type_mapper("scala"), ScalaTypeMapper)

    def test_case_insensitive(self):
        assert isinstance(get_type_mapper("Java"), JavaTypeMapper)

    def test_value_mapper_passed_through(self):
        delegate = object()
        assert get_type_mapper("java", delegate).value_mapper is delegate

    def test_supported_languages(self):
        assert supported_languages() == ["java", "scala"]

    def test_unknown_language(self):
        with pytest.raises(ValueError, match="Unsupported language 'kotlin'"):
            get_type_mapper("kotlin")


class TestTypeMapperBase:
    """Test that only complete language mappers can be created."""

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            TypeMapper()

    def test_subclass_without_syntax(self):
        class NoSyntaxMapper(TypeMapper):
            def get_jackson_resolver_type_id_annotation(self, model_package_name):
                return ""

        with pytest.raises(TypeError):
            NoSyntaxMapper()

    def test_subclass_without_jackson_annotation(self):
        class NoAnnotationMapper(TypeMapper):
            syntax = JavaTypeMapper.syntax

        with pytest.raises(TypeError):
            NoAnnotationMapper()
