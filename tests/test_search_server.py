"""End-to-end tests for the SearchServer surface."""

import pytest

from search_server import BadArgument, DocumentStatus, OutOfRange, SearchServer


QUERY = "пушистый ухоженный кот"


def ids(documents):
    return [doc.id for doc in documents]


class TestConstruction:

    def test_stop_words_from_string(self):
        server = SearchServer("и в  на")
        assert server.stop_words == {"и", "в", "на"}

    def test_stop_words_from_iterable(self):
        server = SearchServer(["in", "", "the", "in"])
        assert server.stop_words == {"in", "the"}

    def test_no_stop_words(self):
        assert SearchServer().stop_words == frozenset()

    def test_invalid_stop_word_string(self):
        with pytest.raises(BadArgument):
            SearchServer("и \x10")

    def test_invalid_stop_word_list(self):
        with pytest.raises(BadArgument):
            SearchServer(["in", "\x10"])

    def test_config_dict_overrides_defaults(self):
        server = SearchServer(config_dict={"MAX_RESULT_DOCUMENT_COUNT": 2})
        for document_id in range(4):
            server.add_document(document_id, "cat", DocumentStatus.ACTUAL, [document_id])
        assert ids(server.find_top_documents("cat")) == [3, 2]
        assert server.config.EPSILON == 1e-6


class TestAddDocument:

    def test_document_count(self):
        server = SearchServer()
        assert server.get_document_count() == 0
        server.add_document(12, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [1])
        assert server.get_document_count() == 1
        server.add_document(4, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [12, 1, 5])
        assert len(server) == 2

    def test_stop_words_are_excluded_from_documents(self):
        server = SearchServer()
        server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
        assert ids(server.find_top_documents("in")) == [42]

        server = SearchServer("in the")
        server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, [1, 2, 3])
        assert server.find_top_documents("in") == []
        assert server.match_document("cat", 42)[0] == ["cat"]
        assert server.match_document("-cat", 42)[0] == []
        assert server.match_document("in", 42) == ([], DocumentStatus.ACTUAL)

    def test_negative_id(self, pet_server):
        stats = pet_server.get_stats()
        with pytest.raises(BadArgument):
            pet_server.add_document(-11, "чук и гек", DocumentStatus.ACTUAL, [3])
        assert pet_server.get_stats() == stats
        assert list(pet_server) == [12, 4, 42]

    def test_duplicate_id(self, pet_server):
        with pytest.raises(BadArgument):
            pet_server.add_document(4, "пьют чай", DocumentStatus.ACTUAL, [3, 4, 1])
        assert pet_server.get_document_count() == 3
        assert pet_server.find_top_documents("чай") == []
        assert pet_server.get_word_frequencies(4) == pytest.approx(
            {"пушистый": 0.5, "кот": 0.25, "хвост": 0.25})

    def test_control_character_in_text(self):
        server = SearchServer()
        with pytest.raises(BadArgument):
            server.add_document(2, "чук \x02 гек", DocumentStatus.ACTUAL, [3])
        assert server.get_document_count() == 0
        assert server.get_stats()["index_size"] == 0

    def test_failed_add_does_not_index_earlier_words(self):
        server = SearchServer()
        server.add_document(1, "гек", DocumentStatus.ACTUAL, [1])
        with pytest.raises(BadArgument):
            server.add_document(2, "чук гек\x02", DocumentStatus.ACTUAL, [3])
        assert server.find_top_documents("чук") == []
        assert server.match_document("гек", 1) == (["гек"], DocumentStatus.ACTUAL)

    def test_unknown_status(self):
        server = SearchServer()
        with pytest.raises(BadArgument):
            server.add_document(1, "cat", "ACTUAL", [1])
        assert server.get_document_count() == 0

    def test_non_integer_ratings(self):
        server = SearchServer()
        with pytest.raises(BadArgument):
            server.add_document(1, "cat", DocumentStatus.ACTUAL, [1.5])
        assert server.get_document_count() == 0

    def test_stop_word_only_document(self):
        server = SearchServer("и в на")
        server.add_document(1, "и в на и", DocumentStatus.ACTUAL, [5])
        assert server.get_document_count() == 1
        assert server.get_stats()["index_size"] == 0
        assert server.get_document_id(0) == 1
        assert server.get_word_frequencies(1) == {}

        server.add_document(2, "кот", DocumentStatus.ACTUAL, [1])
        assert ids(server.find_top_documents("кот")) == [2]
        assert server.match_document("кот", 1) == ([], DocumentStatus.ACTUAL)

    def test_empty_document(self):
        server = SearchServer()
        server.add_document(0, "", DocumentStatus.IRRELEVANT, [])
        assert server.get_document_count() == 1
        assert server.match_document("cat", 0) == ([], DocumentStatus.IRRELEVANT)


class TestFindTopDocuments:

    def test_relevance_with_predicate(self, pet_server):
        found = pet_server.find_top_documents(
            QUERY, lambda document_id, status, rating: document_id > 0)
        assert ids(found) == [4, 42, 12]
        assert [doc.relevance for doc in found] == pytest.approx([0.6507, 0.2746, 0.1014], abs=1e-3)
        assert [doc.rating for doc in found] == [6, 2, 1]

    def test_predicate_by_rating(self, pet_server):
        found = pet_server.find_top_documents(QUERY, lambda document_id, status, rating: rating >= 5)
        assert ids(found) == [4]
        assert found[0].relevance == pytest.approx(0.6507, abs=1e-3)

    def test_predicate_by_status(self, pet_server):
        found = pet_server.find_top_documents(
            QUERY, lambda document_id, status, rating: status == DocumentStatus.ACTUAL)
        assert ids(found) == [4, 12]

    def test_status_filter(self, pet_server):
        assert ids(pet_server.find_top_documents(QUERY, DocumentStatus.ACTUAL)) == [4, 12]
        assert ids(pet_server.find_top_documents(QUERY, DocumentStatus.BANNED)) == [42]
        assert pet_server.find_top_documents(QUERY, DocumentStatus.REMOVED) == []

    def test_default_status_is_actual(self):
        server = SearchServer("и в на")
        server.add_document(12, "белый кот и модный ошейник", DocumentStatus.IRRELEVANT, [1])
        server.add_document(4, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [12, 1, 5])
        server.add_document(42, "ухоженный пёс выразительные глаза", DocumentStatus.BANNED, [-2, 5, 3])
        assert ids(server.find_top_documents(QUERY)) == [4]

    def test_sorted_by_relevance_with_ratings(self):
        server = SearchServer("и в на")
        server.add_document(12, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [1])
        server.add_document(4, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [12, 1, 5])
        server.add_document(42, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [-2, 5, 3])
        found = server.find_top_documents(QUERY)
        assert [doc.relevance for doc in found] == sorted((doc.relevance for doc in found), reverse=True)
        assert [doc.rating for doc in found] == [6, 2, 1]

    def test_minus_words(self, song_server):
        assert ids(song_server.find_top_documents("-in love")) == [4]
        assert ids(song_server.find_top_documents("in -love")) == [12]
        assert song_server.find_top_documents("-in -love") == []

    def test_stop_only_query(self, pet_server):
        assert pet_server.find_top_documents("и на") == []

    def test_minus_stop_word_is_a_stop_word(self, pet_server):
        assert ids(pet_server.find_top_documents("кот -и")) == [4, 12]

    def test_tie_broken_by_rating(self):
        server = SearchServer()
        server.add_document(1, "cat dog", DocumentStatus.ACTUAL, [1])
        server.add_document(2, "cat bird", DocumentStatus.ACTUAL, [5])
        server.add_document(3, "fish", DocumentStatus.ACTUAL, [9])
        assert ids(server.find_top_documents("cat")) == [2, 1]

    def test_top_five(self):
        server = SearchServer()
        for document_id in range(6):
            server.add_document(document_id, f"cat word{document_id}", DocumentStatus.ACTUAL, [1])
        assert len(server.find_top_documents("cat")) == 5

    def test_case_sensitive(self, song_server):
        assert ids(song_server.find_top_documents("I", DocumentStatus.BANNED)) == [42]
        assert song_server.find_top_documents("i", DocumentStatus.BANNED) == []

    def test_predicate_errors_propagate(self, pet_server):
        def predicate(document_id, status, rating):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            pet_server.find_top_documents(QUERY, predicate)
        assert pet_server.get_document_count() == 3

    @pytest.mark.parametrize("raw_query", ["", "кот \x02", "--кот", "кот -", "-"])
    def test_malformed_queries(self, pet_server, raw_query):
        with pytest.raises(BadArgument):
            pet_server.find_top_documents(raw_query)


class TestMatchDocument:

    def test_plus_words(self, song_server):
        assert song_server.match_document("love sweet", 4) == (["love"], DocumentStatus.ACTUAL)

    def test_plus_and_minus_same_word(self, song_server):
        assert song_server.match_document("love -love", 4) == ([], DocumentStatus.ACTUAL)

    def test_minus_word_present(self, song_server):
        assert song_server.match_document("sweet -home", 12) == ([], DocumentStatus.ACTUAL)

    def test_minus_word_absent(self, song_server):
        assert song_server.match_document("sit -home", 42) == (["sit"], DocumentStatus.BANNED)

    def test_words_are_sorted(self, song_server):
        assert song_server.match_document("sit any", 42) == (["any", "sit"], DocumentStatus.BANNED)

    def test_any_present_minus_word_excludes(self, song_server):
        assert song_server.match_document("sit -home -any", 42) == ([], DocumentStatus.BANNED)

    def test_minus_only(self, song_server):
        assert song_server.match_document("-sit -home", 42) == ([], DocumentStatus.BANNED)

    def test_every_document_word_matches_itself(self, pet_server):
        for document_id in pet_server:
            status = pet_server.indexer.get_document_data(document_id).status
            for word in pet_server.get_word_frequencies(document_id):
                assert pet_server.match_document(word, document_id) == ([word], status)
                assert pet_server.match_document(f"{word} -{word}", document_id) == ([], status)

    def test_missing_word(self, pet_server):
        assert pet_server.match_document("пёс", 4) == ([], DocumentStatus.ACTUAL)

    def test_stop_only_query_reports_actual(self, pet_server):
        assert pet_server.match_document("и", 42) == ([], DocumentStatus.ACTUAL)

    def test_unknown_document(self, pet_server):
        with pytest.raises(BadArgument):
            pet_server.match_document("кот", 2)

    @pytest.mark.parametrize("raw_query", ["", "кот \x02", "--кот", "sit -"])
    def test_malformed_queries(self, pet_server, raw_query):
        with pytest.raises(BadArgument):
            pet_server.match_document(raw_query, 4)


class TestDocumentIds:

    def test_get_document_id(self, pet_server):
        assert pet_server.get_document_id(0) == 12
        assert pet_server.get_document_id(1) == 4
        assert pet_server.get_document_id(2) == 42

    @pytest.mark.parametrize("index", [-1, 3, 12])
    def test_out_of_range(self, pet_server, index):
        with pytest.raises(OutOfRange):
            pet_server.get_document_id(index)

    def test_out_of_range_is_index_error(self, pet_server):
        with pytest.raises(IndexError):
            pet_server.get_document_id(pet_server.get_document_count())

    def test_iteration_follows_insertion_order(self, pet_server):
        assert list(pet_server) == [12, 4, 42]


class TestExtras:

    def test_word_frequencies(self, pet_server):
        assert pet_server.get_word_frequencies(12) == pytest.approx(
            {"белый": 0.25, "кот": 0.25, "модный": 0.25, "ошейник": 0.25})
        assert pet_server.get_word_frequencies(100) == {}

    def test_stats(self, pet_server):
        stats = pet_server.get_stats()
        assert stats["num_documents"] == 3
        assert stats["index_size"] == 10
        assert stats["total_postings"] == 11
        assert stats["num_stop_words"] == 3

    def test_suggest_corrections(self, pet_server):
        assert pet_server.suggest_corrections("пушистй кот -хвсот") == {"пушистй": ["пушистый"]}

    def test_suggest_corrections_disabled(self):
        server = SearchServer(config_dict={"AUTO_CORRECT_ENABLED": False})
        server.add_document(1, "пушистый", DocumentStatus.ACTUAL, [1])
        assert server.suggest_corrections("пушистй") == {}

    def test_suggest_corrections_rejects_bad_query(self, pet_server):
        with pytest.raises(BadArgument):
            pet_server.suggest_corrections("--кот")
