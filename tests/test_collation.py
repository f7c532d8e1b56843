from northwind.utils.collation import collation_key, locale_sorted


def test_case_does_not_dominate_order():
    names = ["Banana", "apple", "Cherry"]

    assert locale_sorted(names, key=lambda n: n) == ["apple", "Banana", "Cherry"]
    assert sorted(names) == ["Banana", "Cherry", "apple"]


def test_accented_letters_sort_with_their_base_letter():
    names = ["Zaanse koeken", "Côte de Blaye", "Chai"]

    assert locale_sorted(names, key=lambda n: n) == ["Chai", "Côte de Blaye", "Zaanse koeken"]


def test_empty_name_sorts_first():
    assert collation_key("") < collation_key("a")
