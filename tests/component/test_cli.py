"""
route-scanner CLI Component Tests
"""
import json
import logging
from unittest.mock import patch

import pytest

from route_scanner import cli
from route_scanner.config import ScannerConfig
from route_scanner.scanner import RouteScanner
from tests.component.mocks import MockConsul

pytestmark = [pytest.mark.component, pytest.mark.asyncio]

USER_CONTROLLER_MODULE = "microservices.user_service.user_controller"


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove the handlers main() installs"""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in [h for h in root.handlers if getattr(h, "_route_scanner_handler", False)]:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


class TestPreview:
    """Test the preview command"""

    async def test_preview_user_service(self, monkeypatch):
        monkeypatch.setenv("SERVICE_NAME", "user-service")
        monkeypatch.setenv("ROUTE_SCANNER_BASE_PACKAGE", "microservices.user_service")

        lines = cli.preview_routes([USER_CONTROLLER_MODULE])

        assert [json.loads(line)["routeId"] for line in lines] == ["user-usercontroller"]

    async def test_preview_with_docs(self, monkeypatch):
        monkeypatch.setenv("SERVICE_NAME", "user-service")
        monkeypatch.setenv("ROUTE_SCANNER_BASE_PACKAGE", "microservices.user_service")
        monkeypatch.setenv("ROUTE_SCANNER_SWAGGER_INCLUDE_WEBJARS", "false")

        lines = cli.preview_routes([USER_CONTROLLER_MODULE], with_docs=True)

        assert len(lines) == 6
        assert json.loads(lines[-1])["routeId"] == "user-swagger-config"

    async def test_main_prints_routes(self, monkeypatch, capsys):
        monkeypatch.setenv("SERVICE_NAME", "user-service")
        monkeypatch.setenv("ROUTE_SCANNER_BASE_PACKAGE", "microservices.user_service")

        assert await cli.main(["preview", USER_CONTROLLER_MODULE]) == 0

        assert '"routeId":"user-usercontroller"' in capsys.readouterr().out

    async def test_no_command(self, capsys):
        assert await cli.main([]) == 0
        assert "preview" in capsys.readouterr().out


class TestAggregateDocs:
    """Test the aggregate-docs command"""

    def _scanner(self, sink) -> RouteScanner:
        return RouteScanner(sink, config_loader=lambda: ScannerConfig(service_name="gateway"))

    async def test_publishes_named_services(self, mock_sink):
        with patch("route_scanner.cli.create_route_scanner", return_value=self._scanner(mock_sink)):
            failures = await cli.publish_aggregated_docs(["user", "order", "user"])

        assert failures == 0
        assert mock_sink.route_ids() == ["gateway-swagger-order", "gateway-swagger-user"]
        assert mock_sink.connected and mock_sink.closed

    async def test_adds_consul_services(self, mock_sink):
        consul = MockConsul({"payment_service": [], "consul": []})

        with patch("route_scanner.cli.create_route_scanner", return_value=self._scanner(mock_sink)), \
                patch("route_scanner.catalog.consul.Consul", return_value=consul):
            await cli.publish_aggregated_docs(["user"], from_consul=True)

        assert mock_sink.route_ids() == ["gateway-swagger-payment", "gateway-swagger-user"]

    async def test_nothing_to_publish(self, mock_sink):
        with patch("route_scanner.cli.create_route_scanner", return_value=self._scanner(mock_sink)):
            assert await cli.publish_aggregated_docs([]) == 0

        mock_sink.assert_nothing_published()

    async def test_failures_returned(self, mock_sink):
        mock_sink.fail_on_call(1)

        with patch("route_scanner.cli.create_route_scanner", return_value=self._scanner(mock_sink)):
            assert await cli.publish_aggregated_docs(["user", "order"]) == 1
