from garden_agent.analysis import Analysis, analyze, occurrences


def test_empty_conversation_has_no_signal(conversation):
    analysis = analyze(conversation())
    assert analysis == Analysis()
    assert analysis.is_empty
    assert analysis.sunlight is None
    assert analysis.maintenance is None
    assert analysis.climate is None


def test_assistant_text_is_not_analyzed(conversation):
    msgs = conversation(("assistant", "Q-style: modern, cottage, Mediterranean, tropical?"))
    assert analyze(msgs).is_empty


def test_style_score_counts_each_keyword(conversation):
    analysis = analyze(conversation(("user", "I love modern minimal clean lines")))
    assert analysis.styles["Modern Minimal"] >= 3
    assert all(score == 0 for style, score in analysis.styles.items() if style != "Modern Minimal")


def test_style_score_counts_repeated_occurrences(conversation):
    analysis = analyze(conversation(("user", "modern, modern and more modern")))
    assert analysis.styles["Modern Minimal"] == 3


def test_style_keywords_match_literally():
    assert occurrences("a.b.c", ".") == 2
    assert occurrences("abc", ".") == 0
    assert occurrences("a sun-baked terrace", "sun-baked") == 1


def test_scores_accumulate_across_user_messages(conversation):
    msgs = conversation(
        ("user", "Something japanese"),
        ("assistant", "Q-feels: What feelings should your garden evoke?"),
        ("user", "Zen, with moss and stone"),
    )
    assert analyze(msgs).styles["Japanese Zen"] == 4


def test_mood_words_follow_vocabulary_order(conversation):
    analysis = analyze(conversation(("user", "serene and cozy")))
    assert analysis.mood == ("Cozy", "Serene")


def test_usage_and_constraints_are_capitalized(conversation):
    analysis = analyze(conversation(("user", "Small sloped yard with a hot tub")))
    assert analysis.usage == ("Hot tub",)
    assert analysis.constraints == ("Small", "Slope")


def test_maintenance_levels(conversation):
    assert analyze(conversation(("user", "low maintenance please"))).maintenance == "low"
    assert analyze(conversation(("user", "no maintenance at all"))).maintenance == "low"
    assert analyze(conversation(("user", "some upkeep is fine"))).maintenance == "medium"
    assert analyze(conversation(("user", "I love gardening"))).maintenance == "high"


def test_low_maintenance_takes_priority(conversation):
    analysis = analyze(conversation(("user", "low maintenance, even though I love gardening")))
    assert analysis.maintenance == "low"


def test_sunlight_last_matching_entry_wins(conversation):
    analysis = analyze(conversation(("user", "full sun in front, mostly shade at the back")))
    assert analysis.sunlight == "shade"


def test_partial_shade_is_overwritten_by_shade(conversation):
    # "shade" is listed after "partial shade" and also matches
    assert analyze(conversation(("user", "partial shade"))).sunlight == "shade"
    assert analyze(conversation(("user", "dappled light"))).sunlight == "partial shade"
    assert analyze(conversation(("user", "it is very sunny"))).sunlight == "full sun"


def test_climate_later_category_wins(conversation):
    assert analyze(conversation(("user", "coastal but we get snow"))).climate == "cold"
    assert analyze(conversation(("user", "pretty arid here"))).climate == "desert"
    assert analyze(conversation(("user", "mild winters"))).climate == "temperate"


def test_liked_plants(conversation):
    analysis = analyze(conversation(("user", "I love lavender and grasses")))
    assert analysis.liked_plants == ("Lavender", "Grasses")
    assert analysis.disliked_plants == ()


def test_disliked_plant_is_also_mentioned(conversation):
    analysis = analyze(conversation(("user", "I dislike roses")))
    assert analysis.disliked_plants == ("Roses",)
    assert analysis.liked_plants == ("Roses",)


def test_plant_synonyms_map_to_canonical_name(conversation):
    analysis = analyze(conversation(("user", "avoid agave please, but juniper is nice")))
    assert "Succulents" in analysis.disliked_plants
    assert "Conifers" in analysis.liked_plants


def test_kids_or_pets_flag(conversation):
    assert analyze(conversation(("user", "we have a dog"))).has_kids_or_pets
    assert analyze(conversation(("user", "two children"))).has_kids_or_pets
    assert not analyze(conversation(("user", "just the two of us"))).has_kids_or_pets


def test_kids_or_pets_matches_substrings(conversation):
    # "location" contains "cat"
    assert analyze(conversation(("user", "the location is windy"))).has_kids_or_pets


def test_analyze_is_idempotent(conversation):
    msgs = conversation(
        ("user", "cottage style with roses, some upkeep, partial shade"),
        ("assistant", "Q-climate: Where are you located?"),
        ("user", "coastal, we have a cat"),
    )
    assert analyze(msgs) == analyze(msgs)
