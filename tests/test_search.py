from fuzzy_combo.candidates import CandidateList
from fuzzy_combo.models import CaseFolding, FilterSettings
from fuzzy_combo.search import FuzzyFilter, fold_case, match_candidate, rank_candidates

FRUITS = ["Apple", "Banana", "Grape", "Pineapple"]


def test_fold_case_ascii_leaves_non_ascii_untouched() -> None:
    assert fold_case("ÀBC-Ž") == "Àbc-Ž"


def test_fold_case_unicode_uses_casefold() -> None:
    assert fold_case("ÀBC Straße", CaseFolding.UNICODE) == "àbc strasse"


def test_exact_match_is_case_insensitive_and_scores_one() -> None:
    match = match_candidate("APPLE", "apple")

    assert match.score == 50
    assert match.score_percent == 1.0
    assert match.positions == (0, 1, 2, 3, 4)


def test_unmatched_query_scores_below_threshold() -> None:
    match = match_candidate("xyz", "foo")

    assert match.score == -45
    assert match.score_percent == -1.5
    assert rank_candidates("xyz", ["foo"]) == []


def test_candidate_characters_are_consumed_once() -> None:
    assert match_candidate("aa", "abc").score_percent == -0.25
    assert match_candidate("aa", "aab").score_percent == 1.0


def test_matching_ignores_candidate_character_order() -> None:
    match = match_candidate("ba", "ab")

    assert match.score_percent == 1.0
    assert match.positions == (0, 1)


def test_max_score_uses_shorter_length() -> None:
    match = match_candidate("watermelon", "watermelxn")

    assert match.score == 75
    assert match.score_percent == 0.75


def test_empty_query_or_candidate_is_accepted() -> None:
    assert match_candidate("", "anything").score_percent == 1.0
    assert match_candidate("abc", "").score_percent == 1.0


def test_rank_candidates_keeps_ties_in_master_order() -> None:
    matches = rank_candidates("ap", FRUITS)

    # Matching ignores character order, so "Grape" ties with "Apple" at 1.0.
    assert [match.text for match in matches] == ["Apple", "Grape", "Pineapple"]
    assert all(match.score_percent == 1.0 for match in matches)
    assert matches[1].positions == (2, 3)


def test_rank_candidates_orders_by_descending_score() -> None:
    matches = rank_candidates(
        "watermelon", ["watermelxn", "melon", "watermelon", "lemon"]
    )

    # Short candidates are penalized for every query character they cannot hold.
    assert [match.text for match in matches] == ["watermelon", "watermelxn"]
    assert [match.score_percent for match in matches] == [1.0, 0.75]
    assert match_candidate("watermelon", "melon").score_percent == -0.5


def test_empty_query_accepts_everything_in_order() -> None:
    matches = rank_candidates("", FRUITS)

    assert [match.text for match in matches] == FRUITS


def test_empty_master_list_gives_empty_result() -> None:
    assert rank_candidates("ap", []) == []


def test_duplicates_are_ranked_independently() -> None:
    matches = rank_candidates("ap", ["Apple", "Apple"])

    assert [match.text for match in matches] == ["Apple", "Apple"]


def test_threshold_is_configurable() -> None:
    settings = FilterSettings(threshold=0.8)

    assert rank_candidates("watermelon", ["watermelxn"], settings) == []


def test_unicode_case_folding_is_opt_in() -> None:
    unicode_settings = FilterSettings(case_folding=CaseFolding.UNICODE)

    assert rank_candidates("STRASSE", ["Straße"]) == []
    matches = rank_candidates("STRASSE", ["Straße"], unicode_settings)
    assert [match.text for match in matches] == ["Straße"]
    assert matches[0].positions == ()


def test_evaluate_repopulates_target_and_resets_selection() -> None:
    target = CandidateList()
    target.add_items(["stale", "entries"])
    target.set_selection_index(1)
    fuzzy_filter = FuzzyFilter(target)

    matches = fuzzy_filter.evaluate("ap", FRUITS)

    assert target.items == ("Apple", "Grape", "Pineapple")
    assert target.get_selection_index() == 0
    assert [match.text for match in matches] == list(target.items)


def test_evaluate_is_idempotent_and_leaves_master_list_alone() -> None:
    master = list(FRUITS)
    target = CandidateList()
    fuzzy_filter = FuzzyFilter(target)

    first = fuzzy_filter.evaluate("an", master)
    second = fuzzy_filter.evaluate("an", master)

    assert first == second
    assert master == FRUITS
    assert target.items == tuple(match.text for match in second)


def test_evaluate_with_no_matches_empties_target() -> None:
    target = CandidateList()
    fuzzy_filter = FuzzyFilter(target)
    fuzzy_filter.evaluate("", FRUITS)

    assert fuzzy_filter.evaluate("zzzz", FRUITS) == []
    assert len(target) == 0
    assert target.current_item() is None


def test_rank_candidates_folds_query_once(monkeypatch) -> None:
    import fuzzy_combo.search as search

    folded: list[str] = []
    original_fold_case = search.fold_case

    def _recording_fold_case(text: str, mode: CaseFolding = CaseFolding.ASCII) -> str:
        folded.append(text)
        return original_fold_case(text, mode)

    monkeypatch.setattr(search, "fold_case", _recording_fold_case)

    matches = search.rank_candidates("AP", FRUITS)

    assert [match.text for match in matches] == ["Apple", "Grape", "Pineapple"]
    assert folded.count("AP") == 1
    assert len(folded) == 1 + len(FRUITS)
