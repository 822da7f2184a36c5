import subprocess
from unittest import mock

import pytest

from astroprompt.versions import (
    format_go_version,
    format_haskell_version,
    format_php_version,
    format_python_version,
    format_ruby_version,
    format_terraform_version,
    get_python_version,
    get_python_virtual_env,
    get_terraform_workspace,
)


def test_format_go_version():
    assert format_go_version("go version go1.12 darwin/amd64") == "v1.12"


def test_format_go_version_unexpected_output():
    assert format_go_version("something else entirely") is None


def test_format_go_version_nothing_after_prefix():
    assert format_go_version("go version go") is None


def test_format_haskell_version():
    assert format_haskell_version("8.6.5\n") == "v8.6.5"


def test_format_php_version():
    assert format_php_version("7.3.8") == "v7.3.8"


def test_format_ruby_version():
    text = "ruby 2.6.0p0 (2018-12-25 revision 66547) [x86_64-linux]"
    assert format_ruby_version(text) == "v2.6.0"


def test_format_ruby_version_too_short():
    assert format_ruby_version("ruby 2.6") is None


def test_format_ruby_version_single_word():
    assert format_ruby_version("ruby") is None


def test_format_python_version():
    assert format_python_version("Python 3.7.2") == "v3.7.2"


def test_format_python_version_anaconda():
    assert format_python_version("Python 3.6.10 :: Anaconda, Inc.") == "v3.6.10"


def _completed(returncode, stdout, stderr):
    return subprocess.CompletedProcess(
        args=["python", "--version"], returncode=returncode, stdout=stdout, stderr=stderr
    )


def test_get_python_version_prefers_stdout():
    with mock.patch("subprocess.run", return_value=_completed(0, b"Python 3.8.1\n", b"")):
        assert get_python_version() == "Python 3.8.1\n"


def test_get_python_version_falls_back_to_stderr():
    with mock.patch("subprocess.run", return_value=_completed(0, b"", b"Python 2.7.17\n")):
        assert get_python_version() == "Python 2.7.17\n"


def test_get_python_version_failure():
    with mock.patch("subprocess.run", return_value=_completed(1, b"", b"")):
        assert get_python_version() is None


def test_get_python_virtual_env(monkeypatch):
    monkeypatch.setenv("VIRTUAL_ENV", "/home/user/envs/my_env")
    assert get_python_virtual_env() == "my_env"


def test_get_python_virtual_env_unset(monkeypatch):
    monkeypatch.delenv("VIRTUAL_ENV", raising=False)
    assert get_python_virtual_env() is None


def test_format_terraform_version_release():
    assert format_terraform_version("Terraform v0.12.14") == "v0.12.14 "


def test_format_terraform_version_prerelease():
    assert format_terraform_version("Terraform v0.12.14-rc1") == "v0.12.14-rc1 "


def test_format_terraform_version_development():
    assert (
        format_terraform_version("Terraform v0.12.14-dev (cca89f74)")
        == "v0.12.14-dev (cca89f74) "
    )


def test_format_terraform_version_multiline():
    text = """Terraform v0.12.13

Your version of Terraform is out of date! The latest version
is 0.12.14. You can update by downloading from www.terraform.io/downloads.html

"""
    assert format_terraform_version(text) == "v0.12.13 "


def test_format_terraform_version_empty():
    assert format_terraform_version("") is None


@pytest.fixture
def clean_tf_env(monkeypatch):
    monkeypatch.delenv("TF_WORKSPACE", raising=False)
    monkeypatch.delenv("TF_DATA_DIR", raising=False)
    return monkeypatch


def test_terraform_workspace_override(clean_tf_env, tmp_path):
    clean_tf_env.setenv("TF_WORKSPACE", "staging")
    assert get_terraform_workspace(tmp_path) == "staging"


def test_terraform_workspace_default(clean_tf_env, tmp_path):
    assert get_terraform_workspace(tmp_path) == "default"


def test_terraform_workspace_from_file(clean_tf_env, tmp_path):
    data_dir = tmp_path / ".terraform"
    data_dir.mkdir()
    (data_dir / "environment").write_text("development", encoding="utf-8")
    assert get_terraform_workspace(tmp_path) == "development"


def test_terraform_workspace_from_data_dir(clean_tf_env, tmp_path):
    data_dir = tmp_path / "custom"
    data_dir.mkdir()
    (data_dir / "environment").write_text("production", encoding="utf-8")
    clean_tf_env.setenv("TF_DATA_DIR", str(data_dir))
    assert get_terraform_workspace(tmp_path) == "production"


def test_terraform_workspace_unreadable(clean_tf_env, tmp_path):
    data_dir = tmp_path / ".terraform"
    (data_dir / "environment").mkdir(parents=True)
    assert get_terraform_workspace(tmp_path) is None