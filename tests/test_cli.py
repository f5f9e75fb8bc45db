import io

from avlkit.cli import run


def session(text):
    out = io.StringIO()
    code = run(io.StringIO(text), out)
    return code, out.getvalue()


def test_exit_returns_zero_and_shows_menu():
    code, output = session("13\n")
    assert code == 0
    assert "--- AVL Tree Menu ---" in output


def test_end_of_input_returns_zero():
    code, output = session("1\n")
    assert code == 0
    assert output.endswith("Value to insert: ")


def test_insert_and_print_in_order():
    _, output = session("1\n5\n1\n3\n1\n9\n4\n13\n")
    assert "\n3 5 9 \n" in output or "> 3 5 9 \n" in output


def test_search_found_and_not_found():
    _, output = session("1 7\n3 7\n3 8\n13\n")
    assert "Value to search: Found\n" in output
    assert "Value to search: Not found\n" in output


def test_remove_then_search():
    _, output = session("1\n4\n2\n4\n3\n4\n13\n")
    assert "Not found\n" in output
    assert "Found\nValue" not in output


def test_map_doubles_values():
    _, output = session("1\n2\n1\n3\n6\n13\n")
    assert "> 4 6 \n" in output


def test_where_filters():
    _, output = session("1 1\n1 5\n1 10\n7\n4\n13\n")
    assert "Filter x > ? 5 10 \n" in output


def test_compare_equal_and_not_equal():
    _, output = session("1\n5\n1\n9\n9\n9 5\n9\n5\n13\n")
    assert "Trees are equal.\n" in output
    assert "Trees are NOT equal.\n" in output


def test_serialize_unknown_pattern_reports_error():
    _, output = session("10\nABC\n13\n")
    assert "Error: Unsupported pattern\n" in output


def test_serialize_in_order():
    _, output = session("1 2\n1 1\n10\nLKP\n13\n")
    assert "Serialized: 1 2 \n" in output


def test_build_from_string():
    _, output = session("11\n3 1 2\nLKP\n13\n")
    assert "Pattern (KLP, LKP, LPK): 1 2 3 \n" in output


def test_build_with_bad_pattern():
    _, output = session("11\n1 2\nNOPE\n13\n")
    assert "Error: Unsupported pattern\n" in output


def test_traverse_unknown_and_known():
    _, output = session("1 1\n12\nZZZ\n12\nLPK\n13\n")
    assert "Traversal (KLP, LKP, LPK): Unknown\n" in output
    assert "Traversal (KLP, LKP, LPK): 1 \n" in output


def test_invalid_number_is_reported():
    _, output = session("1\nabc\n4\n13\n")
    assert "Invalid number\n" in output