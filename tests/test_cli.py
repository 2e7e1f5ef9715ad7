import json

from algoviz.cli import main, parse_values


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "bubble_sort" in out
    assert "avl_balance" in out


def test_parse_values_accepts_commas_and_spaces():
    assert parse_values("5, 3 8,-1") == [5, 3, 8, -1]


def test_bad_values_report_input_error(capsys):
    assert main(["export", "bubble_sort", "--values", "3,x"]) == 1
    err = capsys.readouterr().err
    assert "Error (input_format_error)" in err


def test_out_of_range_value(capsys):
    assert main(["export", "bubble_sort", "--values", "100000"]) == 1
    assert "between" in capsys.readouterr().err


def test_play_binary_search(capsys):
    code = main(["play", "binary_search", "--values", "1,3,5,7", "--target", "5", "--delay", "0"])
    assert code == 0
    out = capsys.readouterr().out
    assert "[found]" in out
    assert json.loads(out.strip().splitlines()[-1]) == {"found": True, "index": 2, "probes": 2}


def test_play_without_values_uses_sample_input(capsys):
    assert main(["play", "inorder", "--delay", "0"]) == 0
    last_line = capsys.readouterr().out.strip().splitlines()[-1]
    assert json.loads(last_line) == {"order": [20, 30, 40, 50, 60, 70, 80]}


def test_export_then_validate(tmp_path, capsys):
    output = tmp_path / "heap.json"
    assert main(["export", "heap_sort", "--values", "4 1 3", "-o", str(output)]) == 0
    trace = json.loads(output.read_text(encoding="utf-8"))
    assert trace["outcome"] == {"sorted": [1, 3, 4]}

    assert main(["validate", "-q", str(tmp_path)]) == 0
    assert "Success: 1, Failed: 0" in capsys.readouterr().out


def test_export_from_intent_file(tmp_path):
    intent = tmp_path / "intent.json"
    intent.write_text(json.dumps({
        "algorithm_id": "avl_balance",
        "data_input": [1, 2, 3],
    }), encoding="utf-8")
    output = tmp_path / "out" / "avl.json"

    assert main(["export", "--intent", str(intent), "-o", str(output)]) == 0
    trace = json.loads(output.read_text(encoding="utf-8"))
    assert trace["outcome"]["rotations"] == 1


def test_validate_failure_exit_code(tmp_path, capsys):
    (tmp_path / "bad.json").write_text("[]", encoding="utf-8")
    assert main(["validate", "-q", str(tmp_path)]) == 1


def test_ask_answers_faq_offline(capsys):
    assert main(["ask", "what", "is", "a", "stack?"]) == 0
    assert "LIFO" in capsys.readouterr().out


def test_ask_without_question_lists_suggestions(capsys):
    assert main(["ask"]) == 0
    out = capsys.readouterr().out
    assert "DSA assistant" in out
    assert "  - Explain bubble sort" in out
