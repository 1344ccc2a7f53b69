import pytest

from wordhash.table import HashTable, build_word_table, main, words


def test_insert_and_get():
    table = HashTable()
    table.insert("water", 5)
    assert table.get("water") == 5
    assert len(table) == 1
    assert "water" in table


def test_missing_key():
    table = HashTable()
    table.insert("a", 1)
    assert table.get("b") is None
    assert "b" not in table


def test_duplicate_keeps_first_value():
    table = HashTable()
    table.insert("k", 1)
    table.insert("k", 2)
    assert table.get("k") == 1
    assert len(table) == 1


def test_default_capacity():
    assert HashTable().capacity == 256


def test_invalid_capacity():
    with pytest.raises(ValueError):
        HashTable(0)


def test_linear_probing_fills_small_table():
    table = HashTable(2)
    table.insert("one", 1)
    table.insert("two", 2)
    assert table.get("one") == 1
    assert table.get("two") == 2
    assert table.load() == 1.0


def test_full_table_raises():
    table = HashTable(1)
    table.insert("one", 1)
    table.insert("one", 9)
    assert table.get("one") == 1
    with pytest.raises(OverflowError):
        table.insert("two", 2)


def test_load_and_needs_to_expand():
    table = HashTable(10)
    for n in range(7):
        table.insert(f"w{n}", n)
    assert table.load() == pytest.approx(0.7)
    assert not table.needs_to_expand()
    table.insert("w7", 7)
    assert table.needs_to_expand()


def test_expand_doubles_and_keeps_entries():
    table = HashTable(8)
    keys = [f"key{n}" for n in range(6)]
    for n, key in enumerate(keys):
        table.insert(key, n)
    table.expand()
    assert table.capacity == 16
    assert len(table) == 6
    assert [table.get(key) for key in keys] == list(range(6))


def test_words_split_on_space_tab_newline_only():
    text = "  the\tquick\nbrown  fox\r\n"
    assert list(words(text)) == ["the", "quick", "brown", "fox\r"]


def test_words_empty():
    assert list(words(" \t\n")) == []


def test_build_word_table_values_are_lengths():
    text = "to be or not to be\n" * 3
    table = build_word_table(text)
    assert len(table) == 4
    assert table.get("not") == 3
    assert table.get("to") == 2


def test_build_word_table_grows():
    text = " ".join(f"word{n}" for n in range(1000))
    table = build_word_table(text)
    assert len(table) == 1000
    assert table.capacity > 256
    assert table.load() <= 0.7 + 1e-9 or not table.needs_to_expand() or len(table) == 1000
    assert all(table.get(f"word{n}") == len(f"word{n}") for n in range(1000))


def test_main_finds_key(tmp_path, capsys):
    path = tmp_path / "text.txt"
    path.write_text("fair water flows\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == 'The key "water" is associated with the value 5\n'


def test_main_reports_missing_key(tmp_path, capsys):
    path = tmp_path / "text.txt"
    path.write_text("fair water flows\n", encoding="utf-8")
    assert main([str(path), "fire"]) == 0
    assert capsys.readouterr().out == 'The key "fire" does not exist in the table\n'


def test_main_missing_file(tmp_path, capsys):
    path = tmp_path / "absent.txt"
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == f"Failed to read {path}\n"