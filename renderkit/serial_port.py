"""Line reader for a serial device such as a sensor board."""

from __future__ import annotations

from types import TracebackType

import serial

BAUD_RATE = 9600
READ_SIZE = 256
READ_INTERVAL_TIMEOUT = 0.050
READ_TOTAL_TIMEOUT = 0.050 + 0.010 * READ_SIZE


class SerialPortError(OSError):
    """Raised when a serial port cannot be opened or used."""


class SerialReader:
    """Reads raw text from a serial port at 9600 baud, 8N1."""

    def __init__(
        self,
        port_name: str,
        *,
        baudrate: int = BAUD_RATE,
        timeout: float = READ_TOTAL_TIMEOUT,
        inter_byte_timeout: float = READ_INTERVAL_TIMEOUT,
    ) -> None:
        self.port_name = port_name
        self.baudrate = baudrate
        self.timeout = timeout
        self.inter_byte_timeout = inter_byte_timeout
        self._port: serial.SerialBase | None = None

    @property
    def is_open(self) -> bool:
        return self._port is not None and self._port.is_open

    @property
    def connection(self) -> serial.SerialBase | None:
        """The underlying port object, or None when closed."""
        return self._port

    def open(self) -> None:
        """Open and configure the port.

        Raises SerialPortError if the port cannot be opened.
        """
        if self.is_open:
            return
        try:
            self._port = serial.serial_for_url(
                self.port_name,
                baudrate=self.baudrate,
                bytesize=serial.EIGHTBITS,
                parity=serial.PARITY_NONE,
                stopbits=serial.STOPBITS_ONE,
                timeout=self.timeout,
                inter_byte_timeout=self.inter_byte_timeout,
            )
        except (serial.SerialException, ValueError) as exc:
            raise SerialPortError(
                f"cannot open serial port {self.port_name!r}: {exc}"
            ) from exc

    def read(self) -> str:
        """Read up to 256 bytes; returns an empty string on a failed read."""
        if not self.is_open:
            raise SerialPortError(f"serial port {self.port_name!r} is not open")
        try:
            data = self._port.read(READ_SIZE)
        except serial.SerialException:
            return ""
        return data.decode("latin-1")

    def close(self) -> None:
        """Close the port if it is open."""
        if self._port is not None:
            self._port.close()
            self._port = None

    def __enter__(self) -> SerialReader:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()