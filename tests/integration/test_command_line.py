#!/usr/bin/env python3
"""
Test the command line interface without AWS or network access.
"""
import json
import sys
from unittest.mock import Mock, patch

import cli
import lambda_function
from advisory.service import AdvisoryResult
from utils.constants import Intent, Permission


def run_cli(argv, capsys):
    with patch.object(sys, "argv", ["cli.py"] + argv):
        assert cli.main() == 0
    return json.loads(capsys.readouterr().out)


def test_build_event_launch():
    event = cli.build_event()

    assert event["request"]["type"] == "LaunchRequest"
    assert event["session"]["new"] is True
    assert "Geolocation" not in event["context"]


def test_build_event_precise_location():
    event = cli.build_event(Intent.HANDLE_LOCATION_DATA, screen=True,
                            granted=Permission.PRECISE, latitude=47.6, longitude=-122.3)

    assert event["request"]["intent"]["name"] == "HandleLocationDataIntent"
    assert "Display" in event["context"]["System"]["device"]["supportedInterfaces"]
    scopes = event["context"]["System"]["user"]["permissions"]["scopes"]
    assert scopes[Permission.PRECISE.scope]["status"] == "GRANTED"
    assert event["context"]["Geolocation"]["coordinate"]["latitudeInDegrees"] == 47.6


def test_cli_launch(capsys):
    response = run_cli(["launch"], capsys)
    assert "Welcome to Fly Drone!" in response["response"]["outputSpeech"]["ssml"]


def test_cli_keeps_state_between_runs(tmp_path, capsys):
    """Test a permission request followed by a location data request"""
    state_dir = str(tmp_path)
    geolocator = Mock()
    geolocator.reverse_geocode.return_value = "Seattle"
    advisory_client = Mock()
    advisory_client.fetch.return_value = AdvisoryResult("yellow", "Cloudy", 7)

    try:
        response = run_cli(["--state-dir", state_dir, "request_permission", "--screen"], capsys)
        assert response["response"]["card"]["permissions"] == [Permission.PRECISE.scope]

        with patch("lambda_function.get_geolocator", return_value=geolocator), \
                patch("lambda_function.get_advisory_client", return_value=advisory_client):
            response = run_cli(["--state-dir", state_dir, "location_data",
                                "--granted", "precise", "--latitude", "47.6",
                                "--longitude", "-122.3"], capsys)
    finally:
        lambda_function.TEST_STATE_HANDLER = None

    speech = response["response"]["outputSpeech"]["ssml"]
    assert "Seattle" in speech
    assert "Cloudy" in speech
    advisory_client.fetch.assert_called_once_with(47.6, -122.3)


def test_cli_json_input(tmp_path, capsys):
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps(cli.build_event(Intent.UNHANDLED_DEEP_LINK, query="hello")))

    response = run_cli(["--json-input", str(request_file)], capsys)

    assert "didn't understand hello." in response["response"]["outputSpeech"]["ssml"]
