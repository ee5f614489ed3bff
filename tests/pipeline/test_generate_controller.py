# tests/pipeline/test_generate_controller.py
import pytest

from generator.controllers.generate_controller import GenerateController, list_failures
from generator.errors import (
    InvalidFileNameError,
    MissingInputDirectoryError,
    MissingRowsError,
    NoInputFilesError,
    OutputDirectoryError,
)
from generator.model import GeneratorSettings
from generator.services.directory_scan_service import DirectoryScanService, validate_file_name

LOGIN_HTML = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" "http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">
<html xmlns="http://www.w3.org/1999/xhtml" xml:lang="en" lang="en">
<head>
<link rel="selenium.base" href="http://shop.example.com/" />
<title>login</title>
</head>
<body>
<table>
<thead><tr><td rowspan="1" colspan="3">login</td></tr></thead>
<tbody>
<tr><td>open</td><td>/login</td><td></td></tr>
<tr><td>type</td><td>id=username</td><td>bob</td></tr>
<tr><td>clickAndWait</td><td>//form/button</td><td></td></tr>
</tbody></table>
</body>
</html>
"""

EXPECTED_LOGIN_CEST = """<?php

class LoginTestCest
{
    // TODO Please rename the following function name.
    public function xxxTest(\\AcceptanceTester $I)
    {
        $I->amOnPage('/login');
        $I->fillField('#username', 'bob');
        // TODO X Path is deprecated.
        // TODO Please implement "waiting", e.g. $I->waitForJS('return $.active == 0;', 60);
        // $I->waitForText('foo', 30);
        $I->click('//form/button');
    }
}"""


@pytest.fixture
def dirs(tmp_path):
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    return input_dir, tmp_path / "output"


def make_controller(input_dir, output_dir, **overrides):
    return GenerateController(GeneratorSettings(input_dir=input_dir, output_dir=output_dir, **overrides))


# --- Bestandsnamen ---

@pytest.mark.parametrize("name", ["../evil.html", "evil\0.html", "123start.html", "login-test.html",
                                  "a.html", "Login.htm", "Login.html.bak", ""])
def test_validate_file_name_rejects(name):
    with pytest.raises(InvalidFileNameError) as exc:
        validate_file_name(name)
    assert str(exc.value) == f"The file name is invalid. {name}"


@pytest.mark.parametrize("name", ["LoginTest.html", "login_test.html", "ab.html", "Z9_.html"])
def test_validate_file_name_accepts(name):
    assert validate_file_name(name) == name


def test_output_names(dirs):
    controller = make_controller(*dirs)
    assert controller.output_class_name("login_test.html") == "LoginTestCest"
    assert controller.output_class_name("checkout.html") == "CheckoutCest"
    assert controller.output_file_path("CheckoutCest") == dirs[1] / "CheckoutCest.php"


def test_output_suffix_is_configurable(dirs):
    controller = make_controller(*dirs, class_suffix="Test")
    assert controller.output_class_name("login_test.html") == "LoginTestTest"


# --- Directory scan ---

def test_missing_input_dir_aborts(tmp_path):
    with pytest.raises(MissingInputDirectoryError) as exc:
        make_controller(tmp_path / "nope", tmp_path / "out").run()
    assert str(exc.value) == "There is not a directory of input files."


def test_no_input_files_aborts(dirs):
    input_dir, output_dir = dirs
    (input_dir / "notes.txt").write_text("x")
    with pytest.raises(NoInputFilesError) as exc:
        make_controller(input_dir, output_dir).run()
    assert str(exc.value) == "There are not any input files."
    assert output_dir.is_dir()


def test_scan_is_sorted_and_creates_output_dir(dirs):
    input_dir, output_dir = dirs
    for name in ("b_case.html", "A_case.html", "c_case.html"):
        (input_dir / name).write_text(LOGIN_HTML)

    scanner = DirectoryScanService(input_dir, output_dir / "nested")
    paths = scanner.list_input_files()

    assert [p.name for p in paths] == ["A_case.html", "b_case.html", "c_case.html"]
    assert (output_dir / "nested").is_dir()
    # Idempotent when the directory already exists.
    scanner.confirm_output_dir()


def test_output_dir_that_cannot_be_created_aborts(dirs):
    input_dir, output_dir = dirs
    (input_dir / "login_test.html").write_text(LOGIN_HTML)
    # Een bestand op de plek van de output map.
    output_dir.write_text("not a directory")

    with pytest.raises(OutputDirectoryError) as exc:
        make_controller(input_dir, output_dir).run()
    assert str(exc.value) == f"Failed to create the output directory. {output_dir}"
    assert exc.value.output_dir == output_dir


def test_input_extension_drives_scan_and_naming(dirs):
    input_dir, output_dir = dirs
    (input_dir / "login_test.htm").write_text(LOGIN_HTML)
    (input_dir / "other.html").write_text(LOGIN_HTML)

    report = make_controller(input_dir, output_dir, input_extension="htm").run()

    assert report.ok
    assert [r.input_path.name for r in report.results] == ["login_test.htm"]
    assert report.results[0].class_name == "LoginTestCest"
    assert (output_dir / "LoginTestCest.php").read_text(encoding="utf-8") == EXPECTED_LOGIN_CEST


# --- Generatie ---

def test_generates_expected_cest_file(dirs):
    input_dir, output_dir = dirs
    (input_dir / "login_test.html").write_text(LOGIN_HTML, encoding="utf-8")

    report = make_controller(input_dir, output_dir).run()

    assert report.ok
    [result] = report.results
    assert result.class_name == "LoginTestCest"
    assert result.output_path == output_dir / "LoginTestCest.php"
    assert result.statements == 3
    assert result.output_path.read_text(encoding="utf-8") == EXPECTED_LOGIN_CEST


def test_generation_is_idempotent(dirs):
    input_dir, output_dir = dirs
    (input_dir / "login_test.html").write_text(LOGIN_HTML, encoding="utf-8")
    controller = make_controller(input_dir, output_dir)

    controller.run()
    first = (output_dir / "LoginTestCest.php").read_bytes()
    controller.run()
    assert (output_dir / "LoginTestCest.php").read_bytes() == first


def test_existing_output_is_overwritten(dirs):
    input_dir, output_dir = dirs
    output_dir.mkdir()
    (output_dir / "LoginTestCest.php").write_text("old content that is much longer than needed " * 100)
    (input_dir / "login_test.html").write_text(LOGIN_HTML, encoding="utf-8")

    make_controller(input_dir, output_dir).run()
    assert (output_dir / "LoginTestCest.php").read_text(encoding="utf-8") == EXPECTED_LOGIN_CEST


def test_per_file_errors_do_not_stop_the_batch(dirs):
    input_dir, output_dir = dirs
    (input_dir / "123start.html").write_text(LOGIN_HTML)
    (input_dir / "broken.html").write_text("<html><head><link href='/'/></head><body></body></html>")
    (input_dir / "login_test.html").write_text(LOGIN_HTML)

    report = make_controller(input_dir, output_dir).run()

    assert not report.ok
    assert [r.input_path.name for r in report.results] == ["123start.html", "broken.html", "login_test.html"]
    failed = {r.input_path.name: r for r in report.failed}
    assert failed["123start.html"].error_type == "InvalidFileNameError"
    assert failed["123start.html"].error == "The file name is invalid. 123start.html"
    assert failed["broken.html"].error_type == "MissingRowsError"
    assert [r.class_name for r in report.succeeded] == ["LoginTestCest"]
    assert (output_dir / "LoginTestCest.php").exists()
    assert not (output_dir / "BrokenCest.php").exists()
    assert list_failures(report) == [
        "123start.html: The file name is invalid. 123start.html",
        "broken.html: There is not a test case in the html file.",
    ]


def test_fail_fast_reraises_first_error(dirs):
    input_dir, output_dir = dirs
    (input_dir / "broken.html").write_text("<html><head><link href='/'/></head></html>")
    (input_dir / "login_test.html").write_text(LOGIN_HTML)

    with pytest.raises(MissingRowsError):
        make_controller(input_dir, output_dir, fail_fast=True).run()
    assert not (output_dir / "LoginTestCest.php").exists()


def test_unwritable_output_is_reported_with_path(dirs):
    input_dir, output_dir = dirs
    (input_dir / "login_test.html").write_text(LOGIN_HTML)
    # A directory in place of the output file makes the write fail.
    (output_dir / "LoginTestCest.php").mkdir(parents=True)

    report = make_controller(input_dir, output_dir).run()

    [result] = report.failed
    assert result.error_type == "OutputWriteError"
    assert str(output_dir / "LoginTestCest.php") in result.error
