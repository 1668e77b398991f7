from dining_coach.menu.parser import parse_line, parse_menu


def test_filet_with_bearnaise():
    dish = parse_line("Filet mignon 8 oz with béarnaise")
    assert dish.name == "Filet mignon 8 oz with béarnaise"
    assert dish.protein_type == "beef"
    assert "creamy" in dish.cooking
    assert dish.sauces == ["béarnaise"]
    assert dish.is_high_sodium is False
    assert dish.allergens == ["dairy"]


def test_matching_is_case_insensitive():
    dish = parse_line("GRILLED SALMON, BÉARNAISE")
    assert dish.protein_type == "fish"
    assert dish.cooking == ["grilled", "creamy"]
    assert dish.sauces == ["béarnaise"]


def test_first_protein_wins():
    assert parse_line("Surf and turf: filet and shrimp").protein_type == "beef"
    assert parse_line("Chicken and shrimp skewers").protein_type == "chicken"
    assert parse_line("Shrimp scampi").protein_type == "shrimp"
    assert parse_line("Nigiri set").protein_type == "sashimi"


def test_unrecognised_line_yields_name_only():
    dish = parse_line("Chef's surprise")
    assert dish.protein_type is None
    assert dish.cooking == []
    assert dish.sauces == []
    assert dish.sides == []
    assert dish.allergens == []
    assert dish.is_high_sodium is False


def test_creamed_spinach_counts_as_starch_side():
    dish = parse_line("Creamed spinach")
    assert dish.sides == ["pasta_cup", "veg_cup"]
    assert dish.cooking == ["creamy"]
    assert dish.sauces == ["cream_sauce"]


def test_cucumber_adds_salad_and_veg_tags():
    dish = parse_line("Sashimi with edamame and cucumber salad")
    assert dish.protein_type == "sashimi"
    assert dish.sides == ["edamame_cup", "cucumber_salad", "veg_cup", "salad"]


def test_sodium_keywords():
    assert parse_line("Chicken teriyaki with rice").is_high_sodium is True
    assert parse_line("Salmon, soy glaze").is_high_sodium is True
    assert parse_line("Pickled vegetables").is_high_sodium is True
    assert parse_line("Grilled chicken").is_high_sodium is False


def test_soy_sets_cooking_and_sauce():
    dish = parse_line("Salmon, soy glaze")
    assert dish.cooking == ["glazed", "soy_heavy"]
    assert dish.sauces == ["soy"]


def test_starch_sides():
    dish = parse_line("Steak frites with mashed potatoes and rice")
    assert dish.sides == ["fries", "mashed", "rice_cup"]


def test_allergens():
    assert parse_line("Peanut noodles").allergens == ["nuts"]
    assert parse_line("Breaded chicken, cheese").allergens == ["dairy", "gluten"]
    assert parse_line("Prawn cocktail").allergens == ["shellfish"]


def test_parse_menu_skips_blank_lines():
    text = "\n  Filet mignon 8 oz with béarnaise  \n\n\tGrilled salmon\n   \n"
    dishes = parse_menu(text)
    assert [d.name for d in dishes] == ["Filet mignon 8 oz with béarnaise", "Grilled salmon"]


def test_parse_menu_empty_text():
    assert parse_menu("") == []
    assert parse_menu("   \n \n") == []


def test_parse_menu_splits_on_newlines_only():
    text = "Grilled salmon\x0cwith asparagus\r\nTofu teriyaki"
    dishes = parse_menu(text)
    assert [d.name for d in dishes] == ["Grilled salmon\x0cwith asparagus", "Tofu teriyaki"]
    assert dishes[0].protein_type == "fish"
