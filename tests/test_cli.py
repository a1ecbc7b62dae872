import requests

from conftest import FakeResponse, FakeSession
from storefront.cli import main
from storefront.services.render import LOAD_ERROR_MESSAGE, NO_RESULTS_MESSAGE


def test_cli_prints_filtered_products(make_controller, sample_payload, capsys):
    controller = make_controller(FakeSession(FakeResponse(payload=sample_payload)))

    exit_code = main(["--search", "shirt"], controller=controller)

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Red Shirt - $25.00" in out
    assert "Blue Hat" not in out


def test_cli_no_results(make_controller, sample_payload, capsys):
    controller = make_controller(FakeSession(FakeResponse(payload=sample_payload)))
    assert main(["--search", "nothing"], controller=controller) == 0
    assert NO_RESULTS_MESSAGE in capsys.readouterr().out


def test_cli_failure_exit_code(make_controller, capsys):
    controller = make_controller(FakeSession(exc=requests.ConnectionError("down")))
    assert main([], controller=controller) == 1
    assert LOAD_ERROR_MESSAGE in capsys.readouterr().out


def test_cli_writes_html(make_controller, sample_payload, tmp_path):
    controller = make_controller(FakeSession(FakeResponse(payload=sample_payload)))
    out_path = tmp_path / "site" / "catalog.html"

    assert main(["--html-out", str(out_path)], controller=controller) == 0

    html = out_path.read_text(encoding="utf-8")
    assert html.count('class="product-card"') == 3
    assert 'id="loader" class="hidden"' in html
