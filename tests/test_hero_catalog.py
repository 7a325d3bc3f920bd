from superheroes.components.hero import Hero
from superheroes.data.catalog import HeroCatalog
from superheroes.data.heroes import HERO_TABLE, default_catalog, preview_catalog, select_catalog


def test_list_is_restartable_and_stable():
    catalog = default_catalog()
    first = catalog.list()
    second = catalog.list()
    assert first is second
    assert list(catalog) == list(first)


def test_catalog_is_detached_from_source_list():
    source = [Hero("a", "b", "c"), Hero("d", "e", "f")]
    catalog = HeroCatalog(source)
    source.reverse()
    source.append(Hero("g", "h", "i"))

    assert catalog.list() == (Hero("a", "b", "c"), Hero("d", "e", "f"))
    assert len(catalog) == 2


def test_empty_catalog():
    catalog = HeroCatalog()
    assert catalog.list() == ()
    assert len(catalog) == 0


def test_default_catalog_matches_compiled_table_order():
    catalog = default_catalog()
    assert catalog.list() == HERO_TABLE
    assert [hero.name for hero in catalog] == [f"hero{i}" for i in range(1, 7)]
    assert catalog[0].image == "android_superhero1"


def test_preview_catalog_is_prefix_of_default():
    preview = preview_catalog().list()
    assert preview
    assert default_catalog().list()[: len(preview)] == preview


def test_heroes_compare_by_value():
    assert Hero("a", "b", "c") == Hero("a", "b", "c")
    assert HeroCatalog([Hero("a", "b", "c")]) == HeroCatalog([Hero("a", "b", "c")])


def test_select_catalog_preview_is_short_and_settled():
    catalog, inspection_mode = select_catalog(preview=True)
    assert catalog == preview_catalog()
    assert inspection_mode is True


def test_select_catalog_default_animates_full_table():
    catalog, inspection_mode = select_catalog(preview=False)
    assert catalog == default_catalog()
    assert inspection_mode is False
