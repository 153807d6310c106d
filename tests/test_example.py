from mystat.calc import double_and_add_one
from mystat.example import main


def test_main_prints_sample_line(capsys):
    status = main()
    out = capsys.readouterr().out
    assert out == "mystat::double_and_add_one(2) == 5\n"
    assert status == 0


def test_main_with_empty_argv_matches_calc(capsys):
    status = main([])
    out = capsys.readouterr().out
    assert out.strip().endswith(str(double_and_add_one(2)))
    assert status == 0


def test_main_output_is_single_line(capsys):
    main([])
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert out.startswith("mystat::double_and_add_one(2) == ")