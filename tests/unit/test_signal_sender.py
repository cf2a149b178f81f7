"""Tests for psutil-backed signal delivery."""

from __future__ import annotations

import signal
from unittest.mock import MagicMock, patch

import psutil
import pytest

from rpc_reload.errors import SignalDeliveryError
from rpc_reload.signal_sender import PsutilSignalSender, signal_reload


class TestPsutilSignalSender:
    """Tests for PsutilSignalSender.send."""

    def test_sends_signal_to_pid(self) -> None:
        mock_process = MagicMock()
        with patch("psutil.Process", return_value=mock_process) as process_cls:
            PsutilSignalSender().send(4821, signal.SIGHUP)

        process_cls.assert_called_once_with(4821)
        mock_process.send_signal.assert_called_once_with(signal.SIGHUP)

    def test_missing_process_raises_delivery_error(self) -> None:
        with patch("psutil.Process", side_effect=psutil.NoSuchProcess(4821)):
            with pytest.raises(SignalDeliveryError) as exc_info:
                PsutilSignalSender().send(4821, signal.SIGHUP)

        assert exc_info.value.reason == "no such process"
        assert isinstance(exc_info.value.__cause__, psutil.NoSuchProcess)

    def test_process_exiting_during_send_raises_delivery_error(self) -> None:
        mock_process = MagicMock()
        mock_process.send_signal.side_effect = psutil.NoSuchProcess(4821)
        with patch("psutil.Process", return_value=mock_process):
            with pytest.raises(SignalDeliveryError, match="no such process"):
                PsutilSignalSender().send(4821, signal.SIGHUP)

    def test_access_denied_raises_delivery_error(self) -> None:
        mock_process = MagicMock()
        mock_process.send_signal.side_effect = psutil.AccessDenied(1)
        with patch("psutil.Process", return_value=mock_process):
            with pytest.raises(SignalDeliveryError) as exc_info:
                PsutilSignalSender().send(1, signal.SIGHUP)

        assert exc_info.value.reason == "permission denied"
        assert exc_info.value.signal_name == "SIGHUP"


class TestSignalReload:
    """Tests for signal_reload function."""

    def test_delivers_sighup(self, recording_sender) -> None:
        signal_reload(4821, recording_sender)

        assert recording_sender.sent == [(4821, signal.SIGHUP)]

    def test_defaults_to_psutil_sender(self) -> None:
        with patch.object(PsutilSignalSender, "send") as send:
            signal_reload(4821)

        send.assert_called_once_with(4821, signal.SIGHUP)
