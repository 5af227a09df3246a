from workbench.counter import Counter, Model, get_instance, report_error


def test_back_decrements_and_prints(capsys):
    start = 7
    counter = Counter(start)
    assert counter.back() == start - 1
    assert counter.value == start - 1
    assert capsys.readouterr().out == f"{start - 1}\n"


def test_display_returns_and_prints(capsys):
    counter = Counter(12)
    line = counter.display()
    assert line == "now id is 12"
    assert capsys.readouterr().out == "now id is 12\n"


def test_report_error(capsys):
    counter = Counter(3)
    report_error(counter)
    assert counter.value == 2
    assert capsys.readouterr().out == "2\nnow id is 2\n"


def test_get_instance_is_shared(capsys):
    first = get_instance()
    first.back()
    second = get_instance()
    assert first is second
    assert capsys.readouterr().out.endswith(f"now id is {second.value}\n")


def test_model_defaults():
    model = Model()
    assert model.gname == "Mr.stanza"
    assert model.name == "stanza"


def test_model_run_output(capsys):
    Model().run()
    assert capsys.readouterr().out == "-1\nnow id is -1\n"