"""Tests for the sdtgen command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from sdtgen.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def invoke(runner: CliRunner, *args: str):
    return runner.invoke(cli, list(args), catch_exceptions=False)


class TestGenerate:
    """Tests for the generate command."""

    def test_minimal_service(
        self, runner, executable: Path, output_dir: Path
    ) -> None:
        result = invoke(
            runner, "generate",
            "-n", "foo", "-e", str(executable), "-o", str(output_dir),
        )

        service_path = output_dir / "foo.service"
        assert result.exit_code == 0
        assert result.output == f"Wrote service file {service_path}\n"
        assert service_path.read_text(encoding="utf-8") == (
            "[Unit]\n"
            "\n"
            "[Service]\n"
            "Type=simple\n"
            f"ExecStart={executable.resolve()}\n"
            "\n"
            "[Install]\n"
            "WantedBy=multi-user.target\n"
        )
        assert not (output_dir / "foo.timer").exists()

    def test_service_and_timer(
        self, runner, executable: Path, output_dir: Path
    ) -> None:
        result = invoke(
            runner, "generate",
            "-n", "backup", "-e", str(executable), "-o", str(output_dir),
            "-d", "Nightly backup",
            "-a", "network-online.target", "-a", "local-fs.target",
            "-t", "oneshot",
            "-T", "-p", "--on-calendar", "daily",
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            f"Wrote service file {output_dir / 'backup.service'}",
            f"Wrote timer file {output_dir / 'backup.timer'}",
        ]
        service = (output_dir / "backup.service").read_text(encoding="utf-8")
        assert service.startswith(
            "[Unit]\n"
            "Description=Nightly backup\n"
            "After=network-online.target\n"
            "After=local-fs.target\n"
            "\n"
            "[Service]\n"
            "Type=oneshot\n"
        )
        timer = (output_dir / "backup.timer").read_text(encoding="utf-8")
        assert "OnCalendar=daily\nPersistent=true\n" in timer

    def test_timer_without_calendar(
        self, runner, executable: Path, output_dir: Path
    ) -> None:
        result = invoke(
            runner, "generate",
            "-n", "foo", "-e", str(executable), "-o", str(output_dir), "-T",
        )

        assert result.exit_code == 1
        assert result.output == "Timer flag was specified but no OnCalendar\n"
        assert list(output_dir.iterdir()) == []

    def test_missing_executable(
        self, runner, tmp_path: Path, output_dir: Path
    ) -> None:
        missing = tmp_path / "missing"

        result = invoke(
            runner, "generate",
            "-n", "foo", "-e", str(missing), "-o", str(output_dir),
        )

        assert result.exit_code == 1
        assert result.output == f"Executable {missing} does not exist\n"
        assert list(output_dir.iterdir()) == []

    def test_no_check(self, runner, output_dir: Path) -> None:
        result = invoke(
            runner, "generate",
            "-n", "foo", "-e", "/opt/not-installed/app",
            "-o", str(output_dir), "--no-check",
        )

        assert result.exit_code == 0
        service = (output_dir / "foo.service").read_text(encoding="utf-8")
        assert "ExecStart=/opt/not-installed/app\n" in service

    def test_missing_output_directory(
        self, runner, executable: Path, tmp_path: Path
    ) -> None:
        absent = tmp_path / "absent"

        result = invoke(
            runner, "generate",
            "-n", "foo", "-e", str(executable), "-o", str(absent),
            "-T", "--on-calendar", "hourly",
        )

        assert result.exit_code == 1
        assert result.output.splitlines() == [
            f"Error creating service file {absent / 'foo.service'}",
            f"Error creating timer file {absent / 'foo.timer'}",
        ]

    def test_failed_write(
        self,
        runner,
        executable: Path,
        output_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        def fail_replace(self: Path, target: Path) -> Path:
            raise OSError("disk full")

        monkeypatch.setattr(Path, "replace", fail_replace)

        result = invoke(
            runner, "generate",
            "-n", "foo", "-e", str(executable), "-o", str(output_dir),
        )

        assert result.exit_code == 1
        assert result.output == (
            f"Error writing service file {output_dir / 'foo.service'}\n"
        )
        assert list(output_dir.iterdir()) == []

    def test_output_dir_from_environment(
        self, runner, executable: Path, output_dir: Path
    ) -> None:
        result = runner.invoke(
            cli,
            ["generate", "-n", "foo", "-e", str(executable)],
            env={"SDTGEN_OUTPUT_DIR": str(output_dir)},
        )

        assert result.exit_code == 0
        assert (output_dir / "foo.service").exists()

    def test_invalid_name(
        self, runner, executable: Path, output_dir: Path
    ) -> None:
        result = invoke(
            runner, "generate",
            "-n", "bad name", "-e", str(executable), "-o", str(output_dir),
        )

        assert result.exit_code == 1
        assert result.output.startswith("Invalid options: name:")
        assert list(output_dir.iterdir()) == []

    def test_rejects_unknown_restart_policy(
        self, runner, executable: Path, output_dir: Path
    ) -> None:
        result = runner.invoke(
            cli,
            [
                "generate", "-n", "foo", "-e", str(executable),
                "-o", str(output_dir), "--restart", "sometimes",
            ],
        )

        assert result.exit_code == 2
        assert list(output_dir.iterdir()) == []


class TestPreview:
    """Tests for the preview command."""

    def test_prints_units_without_writing(
        self, runner, executable: Path, output_dir: Path
    ) -> None:
        result = invoke(
            runner, "preview",
            "-n", "foo", "-e", str(executable), "-o", str(output_dir),
            "--restart", "on-failure", "--restart-sec", "5",
            "-T", "--on-calendar", "daily",
        )

        assert result.exit_code == 0
        assert f"# {output_dir / 'foo.service'}\n[Unit]\n" in result.output
        assert "Restart=on-failure\nRestartSec=5\n" in result.output
        assert f"# {output_dir / 'foo.timer'}\n[Unit]\n" in result.output
        assert list(output_dir.iterdir()) == []

    def test_legacy_layout(
        self, runner, executable: Path, output_dir: Path
    ) -> None:
        result = invoke(
            runner, "preview",
            "-n", "foo", "-e", str(executable), "-o", str(output_dir),
            "-d", "Worker", "-b", "x.service", "--unit-layout", "legacy",
        )

        assert result.exit_code == 0
        assert "[Unit]\nDescription=Worker\nOnFailure=Worker\n" in result.output
        assert "Before=" not in result.output


def test_help_uses_field_descriptions(runner) -> None:
    result = invoke(runner, "generate", "--help")

    assert result.exit_code == 0
    assert "Restart policy" in result.output
    assert "multi-user.target" in result.output
