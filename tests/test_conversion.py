"""Tests for representations.database.conversion."""

import pytest

from representations.database import is_model, models_to_array


class FakeModel:
    """Duck-typed model: public attributes are its properties."""

    def __init__(self, **attributes):
        self._secret = "internal"
        for key, value in attributes.items():
            setattr(self, key, value)

    def to_dict(self):
        return {
            key: value
            for key, value in vars(self).items()
            if not key.startswith("_") and not isinstance(value, (FakeModel, list))
        }


class RelationModel:
    """Model exposing its properties through iter_properties()."""

    def __init__(self, pk, related=None):
        self.pk = pk
        self.related = related

    def to_dict(self):
        return {"pk": self.pk, "kind": "base"}

    def iter_properties(self):
        yield "kind", "overlay"
        if self.related is not None:
            yield "related", self.related


class TestIsModel:
    def test_object_with_to_dict(self):
        assert is_model(FakeModel(id=1))

    def test_class_is_not_a_model(self):
        assert not is_model(FakeModel)

    @pytest.mark.parametrize("value", [None, 1, "text", {"a": 1}, [1]])
    def test_plain_values(self, value):
        assert not is_model(value)


class TestModelsToArray:
    def test_single_model(self):
        assert models_to_array(FakeModel(id=1, name="Ada")) == {"id": 1, "name": "Ada"}

    def test_private_attributes_are_skipped(self):
        assert "_secret" not in models_to_array(FakeModel(id=1))

    def test_nested_model(self):
        user = FakeModel(id=1, profile=FakeModel(id=7, bio="math"))
        assert models_to_array(user) == {"id": 1, "profile": {"id": 7, "bio": "math"}}

    def test_nested_list_of_models(self):
        user = FakeModel(id=1, posts=[FakeModel(id=2), FakeModel(id=3)])
        assert models_to_array(user) == {"id": 1, "posts": [{"id": 2}, {"id": 3}]}

    def test_converted_properties_win_over_base(self):
        assert models_to_array(RelationModel(1)) == {"pk": 1, "kind": "overlay"}

    def test_iter_properties_is_used(self):
        model = RelationModel(1, related=RelationModel(2))
        assert models_to_array(model) == {
            "pk": 1,
            "kind": "overlay",
            "related": {"pk": 2, "kind": "overlay"},
        }

    def test_list_of_models(self):
        assert models_to_array([FakeModel(id=1), FakeModel(id=2)]) == [{"id": 1}, {"id": 2}]

    def test_tuple_of_models_becomes_list(self):
        assert models_to_array((FakeModel(id=1),)) == [{"id": 1}]

    def test_first_element_not_a_model_leaves_sequence_alone(self):
        model = FakeModel(id=2)
        data = [{"id": 1}, model]
        result = models_to_array(data)
        assert result is data
        assert result[1] is model

    def test_non_model_after_first_model_passes_through(self):
        assert models_to_array([FakeModel(id=1), {"id": 2}]) == [{"id": 1}, {"id": 2}]

    def test_plain_mapping_unchanged(self):
        data = {"user": {"id": 1}, "tags": ["a", "b"]}
        assert models_to_array(data) == {"user": {"id": 1}, "tags": ["a", "b"]}

    @pytest.mark.parametrize("value", [None, 0, "text", 1.5, [], ()])
    def test_scalars_and_empty_sequences_unchanged(self, value):
        assert models_to_array(value) == value

    def test_input_is_not_mutated(self):
        profile = FakeModel(id=7)
        user = FakeModel(id=1, profile=profile)
        models_to_array(user)
        assert user.profile is profile

    @pytest.mark.parametrize("value", [
        FakeModel(id=1, posts=[FakeModel(id=2)]),
        [FakeModel(id=1), FakeModel(id=2)],
        {"a": 1},
        [{"a": 1}, FakeModel(id=3)],
        "text",
    ])
    def test_idempotent(self, value):
        once = models_to_array(value)
        assert models_to_array(once) == once

    def test_relation_cycle_stops(self):
        author = RelationModel(1)
        book = RelationModel(2, related=author)
        author.related = [book]
        assert models_to_array(author) == {
            "pk": 1,
            "kind": "overlay",
            "related": [{
                "pk": 2,
                "kind": "overlay",
                "related": {"pk": 1, "kind": "base"},
            }],
        }
