import io

import pytest

from knucklebones_states import runner
from knucklebones_states.config import preset_enumeration

EXPECTED_REPORT = [
    "Hands: 84",
    "Hand pairs: 3067",
    "Intermediate states: 3083032242",
    "Final states: 1557728432",
    "Total: 4640760674",
]


def test_default_run_prints_report(capsys):
    runner.main([])
    out, err = capsys.readouterr()
    assert out.splitlines() == EXPECTED_REPORT
    assert err == ""


def test_check_preset_is_deterministic():
    outputs = []
    for _ in range(2):
        stdout = io.StringIO()
        stderr = io.StringIO()
        counts = runner.run(preset_enumeration("check"), stdout=stdout, stderr=stderr)
        outputs.append(stdout.getvalue())
        assert counts.total == counts.intermediate + counts.final
        assert stderr.getvalue() == ""
    assert outputs[0] == outputs[1]
    assert outputs[0].splitlines() == EXPECTED_REPORT


def test_verbose_logs_to_stderr(capsys):
    runner.main(["--preset", "check", "--verbose"])
    out, err = capsys.readouterr()
    assert out.splitlines() == EXPECTED_REPORT
    assert "counting states: method=closed-form" in err
    assert "invalid=172227220" in err


def test_overrides_mark_config_custom():
    args = runner.parse_args(["--method", "closed-form", "--chunk-size", "8"])
    cfg = runner.build_config(args)
    assert cfg.method == "closed-form"
    assert cfg.chunk_size == 8
    assert cfg.preset == "custom"


def test_invalid_configuration_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        runner.main(["--method", "exhaustive", "--workers", "3"])
    assert exc.value.code == 1
    out, _ = capsys.readouterr()
    assert out.startswith("Invalid configuration:")
