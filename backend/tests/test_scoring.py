from content_search.services.query_service import normalize_query
from content_search.services.scoring_service import (
    SearchableField,
    field_text,
    highlighted_fields,
    score_entity,
    score_text,
    text_at,
)


class TestScoreText:
    def test_exact_and_word_passes_add_up(self):
        query = normalize_query("servicios")
        # exact 10*3 + one word hit 3*3
        assert score_text("Nuestros Servicios", 3, query) == 39

    def test_word_pass_is_a_cross_product(self):
        query = normalize_query("lima")
        # exact 10 + three text words containing "lima"
        assert score_text("lima lima limas", 1, query) == 19

    def test_short_search_words_do_not_count(self):
        query = normalize_query("de obra")
        # exact 10 + "obra" once; "de" is too short
        assert score_text("casa de obra", 1, query) == 13

    def test_word_overlap_without_exact_match(self):
        query = normalize_query("servicios xyz")
        assert score_text("servicios de construcción", 1, query) == 3

    def test_fuzzy_requires_flag(self):
        assert score_text("construcción", 2, normalize_query("cnstrccn")) == 0
        assert score_text("construcción", 2, normalize_query("cnstrccn", fuzzy=True)) == 2

    def test_fuzzy_ignores_short_words(self):
        assert score_text("abcdef", 1, normalize_query("ace", fuzzy=True)) == 0

    def test_fuzzy_escapes_pattern_characters(self):
        query = normalize_query("c++dev", fuzzy=True)
        assert score_text("c++ developer", 1, query) == 1
        assert score_text("cdev", 1, query) == 0

    def test_empty_values_score_zero(self):
        query = normalize_query("obra", fuzzy=True)
        assert score_text(None, 3, query) == 0
        assert score_text("", 3, query) == 0

    def test_exact_beats_partial_beats_fuzzy(self):
        text = "servicios de construcción"
        exact = score_text(text, 1, normalize_query("servicios", fuzzy=True))
        partial = score_text(text, 1, normalize_query("servicios xyz", fuzzy=True))
        fuzzy = score_text(text, 1, normalize_query("srvcs", fuzzy=True))
        assert exact > partial > fuzzy > 0

    def test_case_insensitive(self):
        assert score_text("TORRE AZUL", 1, normalize_query("torre azul")) > 0


class TestFieldText:
    def test_lists_are_space_joined(self):
        assert field_text(["construcción", "lima", 3]) == "construcción lima"

    def test_mappings_join_string_values(self):
        assert field_text({"city": "Lima", "coordinates": [1, 2]}) == "Lima"

    def test_other_values_have_no_text(self):
        assert field_text(42) is None
        assert field_text(None) is None

    def test_nested_accessor(self):
        extract = text_at("location", "city")
        assert extract({"location": {"city": "Cusco"}}) == "Cusco"
        assert extract({"location": "Cusco"}) is None
        assert extract({}) is None


FIELDS = (
    SearchableField("title", 3, text_at("title")),
    SearchableField("description", 2, text_at("description")),
    SearchableField("tags", 1, text_at("tags")),
)


def test_entity_score_sums_fields():
    query = normalize_query("construcción")
    entity = {"title": "Torre Azul", "description": None, "tags": ["construcción", "lima"]}
    assert score_entity(entity, FIELDS, query) == 13


def test_highlighted_fields_lists_matching_fields_in_table_order():
    query = normalize_query("lima")
    entity = {"title": "Sede Lima", "description": "Oficinas", "tags": ["lima"]}
    assert highlighted_fields(entity, FIELDS, query) == ["title", "tags"]
