"""
Тести для модуля sets

Запуск: pytest tests/test_sets.py -v
Або демо: python tests/test_sets.py
"""

import itertools


SAMPLES = [
    [],
    ["R MR"],
    ["R MR", "R LR", "L MR", "L LR", "L MLF", "R MLF"],
    ["L LR", "R MR", "R IO", "R SO", "L SR", "L IR", "R MLF"],
    ["L SR", "L SO", "R IR", "R IO"],
]


def test_construction_forms():
    """Тест ініціалізаторів: елемент, кілька елементів, список, множина"""
    from dr_gaze.sets import KeyedSet

    single = KeyedSet("R MR")
    several = KeyedSet("R MR", "L MR")
    from_list = KeyedSet(["R MR", "L MR"])
    from_set = KeyedSet(from_list)
    mixed = KeyedSet("R MR", ["L MR", "R LR"], KeyedSet("L LR"))

    assert single.keys() == ["R MR"]
    assert several.equals(from_list)
    assert from_set.equals(from_list)
    assert from_set is not from_list
    assert len(mixed) == 4
    assert KeyedSet().is_empty()
    assert KeyedSet([]).is_empty()

    # Рядок — один елемент, а не послідовність символів
    assert KeyedSet("abc").keys() == ["abc"]

    print(f"✓ Construction: {mixed}")


def test_add_and_remove():
    """Тест add/remove: унікальність ключів, відсутній ключ — не помилка"""
    from dr_gaze.sets import KeyedSet

    s = KeyedSet(["R MR"])
    returned = s.add("R MR", ["L MR", "R MR"])

    assert returned is s
    assert len(s) == 2

    s.remove("missing")
    assert len(s) == 2

    s.remove(["R MR", "also missing"])
    assert s.keys() == ["L MR"]

    assert s.clear() is s
    assert s.is_empty()

    print("✓ Add/remove test")


def test_re_add_overwrites_value():
    """Тест: повторне додавання перезаписує значення, ключ лишається один"""
    from dr_gaze.sets import KeyedSet

    s = KeyedSet({"id": 1, "v": "old"}, key=lambda item: item["id"])
    s.add({"id": 1, "v": "new"})

    assert len(s) == 1
    assert s.keys()[0]["v"] == "new"

    print("✓ Re-add overwrite test")


def test_custom_key_function():
    """Тест функції ключа"""
    from dr_gaze.sets import KeyedSet

    by_lower = KeyedSet(["Ptosis", "EYE_PAIN"], key=str.lower)

    assert by_lower.has("ptosis")
    assert by_lower.has("eye_pain")
    assert "PTOSIS" in by_lower
    assert by_lower.keys() == ["Ptosis", "EYE_PAIN"]

    # Права частина приводиться з функцією ключа лівої
    common = by_lower.intersection(["ptosis", "headache"])
    assert common.keys() == ["Ptosis"]

    # Нові множини зберігають функцію ключа
    assert common.has("PTOSIS")

    print(f"✓ Custom key test: {common}")


def test_other_set_rekeyed_by_receiver():
    """Тест: множина з іншою функцією ключа приводиться функцією ключа отримувача"""
    from dr_gaze.sets import KeyedSet

    by_lower = KeyedSet(["Ptosis"], key=str.lower)
    plain = KeyedSet(["PTOSIS"])

    via_list = by_lower.intersection(["PTOSIS"])
    via_set = by_lower.intersection(plain)
    assert via_list.equals(via_set)
    assert via_set.keys() == ["Ptosis"]

    union = by_lower.union(plain)
    assert len(union) == 1
    assert union.keys() == ["PTOSIS"]

    assert by_lower.is_superset(plain)
    assert by_lower.difference(plain).is_empty()

    copy = by_lower.copy()
    copy.add(plain)
    assert len(copy) == 1
    assert copy.remove(plain).is_empty()

    print(f"✓ Re-keyed right-hand side: {via_set}")


def test_generators_are_expanded():
    """Тест: генератор розгортається, словник лишається одним елементом"""
    from dr_gaze.sets import KeyedSet

    raw = [" R MR ", "L MR"]
    s = KeyedSet(item.strip() for item in raw)

    assert s.equals(["R MR", "L MR"])
    assert s.intersection(x for x in ["R MR", "R LR"]).keys() == ["R MR"]

    people = KeyedSet({"id": 1}, {"id": 2}, key=lambda p: p["id"])
    assert len(people) == 2


def test_keys_stable_without_mutation():
    """Тест: порядок keys() стабільний між викликами"""
    from dr_gaze.sets import KeyedSet

    s = KeyedSet(SAMPLES[3])
    assert s.keys() == s.keys()
    assert list(s) == s.keys()


def test_binary_operations():
    """Тест union / intersection / difference / symmetric_difference"""
    from dr_gaze.sets import KeyedSet

    a = KeyedSet(["a", "b", "c"])
    b = KeyedSet(["b", "c", "d"])

    assert a.union(b).equals(["a", "b", "c", "d"])
    assert a.intersection(b).equals(["b", "c"])
    assert a.difference(b).equals(["a"])
    assert b.difference(a).equals(["d"])
    assert a.symmetric_difference(b).equals(["a", "d"])

    # Операнди не змінюються
    assert a.equals(["a", "b", "c"])
    assert b.equals(["b", "c", "d"])

    # Права частина будь-якої форми
    assert a.union("z").has("z")
    assert a.intersection({"a", "x"}).equals("a")
    assert a.difference(("a", "b")).equals("c")

    print("✓ Binary operations test")


def test_operators():
    """Тест Python операторів"""
    from dr_gaze.sets import KeyedSet

    a = KeyedSet(["a", "b"])
    b = KeyedSet(["b", "c"])

    assert (a | b) == KeyedSet(["a", "b", "c"])
    assert (a & b) == KeyedSet("b")
    assert (a - b) == KeyedSet("a")
    assert (a ^ b) == KeyedSet(["a", "c"])
    assert KeyedSet("a") <= a
    assert a >= KeyedSet("b")
    assert a != b


def test_subset_superset():
    """Тест is_subset / is_superset / has_all / equals"""
    from dr_gaze.sets import KeyedSet

    small = KeyedSet(["R MLF"])
    big = KeyedSet(["R MLF", "L MLF"])

    assert small.is_subset(big)
    assert not big.is_subset(small)
    assert big.is_superset(small)
    assert big.has_all("R MLF", ["L MLF"])
    assert not big.has_all("R MLF", "R MR")

    assert KeyedSet().is_subset(small)
    assert not small.equals(big)
    assert big.equals(["L MLF", "R MLF"])

    print("✓ Subset/superset test")


def test_unhashable():
    """KeyedSet змінний, тому не хешується"""
    from dr_gaze.sets import KeyedSet

    try:
        hash(KeyedSet("a"))
    except TypeError:
        pass
    else:
        raise AssertionError("KeyedSet must not be hashable")


def test_each_early_stop():
    """Тест each(): зупинка сигналом STOP"""
    from dr_gaze.sets import KeyedSet, STOP

    s = KeyedSet(["a", "b", "c", "d"])
    visited = []

    def visit(value, key):
        visited.append(value)
        if len(visited) == 2:
            return STOP

    assert s.each(visit) is s
    assert len(visited) == 2

    # None не зупиняє ітерацію
    visited.clear()
    assert s.each_return(lambda value, key: visited.append(value)) is True
    assert len(visited) == 4

    assert s.each_return(lambda value, key: STOP) is False

    print("✓ each() early stop test")


def test_every_and_some():
    """Тест every_matches / some_matches"""
    from dr_gaze.sets import KeyedSet

    s = KeyedSet(["R MR", "R LR"])

    assert s.every_matches(lambda value, key: key.startswith("R"))
    assert not s.every_matches(lambda value, key: key.endswith("MR"))
    assert KeyedSet().every_matches(lambda value, key: False)

    # Той самий колбек fn(value, key), що й у every_matches
    assert s.some_matches(lambda value, key: value == "R LR")
    assert not s.some_matches(lambda value, key: key == "L LR")
    assert not KeyedSet().some_matches(lambda value, key: True)

    people = KeyedSet({"id": 1, "side": "R"}, {"id": 2, "side": "L"}, key=lambda p: p["id"])
    assert people.some_matches(lambda value, key: value["side"] == "L" and key == 2)
    assert people.every_matches(lambda value, key: isinstance(key, int))


def test_filter_and_legacy_map():
    """Тест filter() та map() з контрактом фільтра"""
    from dr_gaze.sets import KeyedSet

    s = KeyedSet(["R MR", "L MR", "R LR"])

    right = s.filter(lambda key: key.startswith("R "))
    assert right.equals(["R MR", "R LR"])

    # map зберігає ОРИГІНАЛЬНІ елементи, якщо fn не повернула None
    mapped = s.map(lambda key: key.lower() if "MR" in key else None)
    assert mapped.equals(["R MR", "L MR"])
    assert not mapped.has("r mr")

    # Будь-яке значення, крім None, зберігає елемент
    assert s.map(lambda key: 0).equals(s)
    assert s.map(lambda key: None).is_empty()

    print(f"✓ filter/map test: {right}, {mapped}")


def test_algebra_laws():
    """Тест алгебраїчних законів на наборі множин"""
    from dr_gaze.sets import KeyedSet

    sets = [KeyedSet(items) for items in SAMPLES]

    for a, b in itertools.product(sets, repeat=2):
        assert a.union(b).equals(b.union(a))
        assert a.intersection(b).equals(b.intersection(a))
        assert a.equals(a.union(a.intersection(b)).union(a.difference(b)))
        assert a.symmetric_difference(b).equals(a.union(b).difference(a.intersection(b)))

    for a in sets:
        assert a.difference(a).is_empty()
        assert a.union(a).equals(a)
        assert a.is_subset(a)
        assert a.is_superset(a)

    for a, b, c in itertools.product(sets[1:4], repeat=3):
        assert a.union(b).union(c).equals(a.union(b.union(c)))
        assert a.intersection(b.union(c)).equals(a.intersection(b).union(a.intersection(c)))

    print(f"✓ Algebra laws hold on {len(sets)} sets")


def demo():
    """Повна демонстрація модуля sets"""
    print("=" * 60)
    print("Dr.Gaze — Демонстрація KeyedSet")
    print("=" * 60)

    test_construction_forms()
    test_add_and_remove()
    test_re_add_overwrites_value()
    test_custom_key_function()
    test_other_set_rekeyed_by_receiver()
    test_generators_are_expanded()
    test_keys_stable_without_mutation()
    test_binary_operations()
    test_operators()
    test_subset_superset()
    test_unhashable()
    test_each_early_stop()
    test_every_and_some()
    test_filter_and_legacy_map()
    test_algebra_laws()

    print("=" * 60)
    print("✅ Всі тести пройдено успішно!")
    print("=" * 60)


if __name__ == "__main__":
    demo()
