"""Client (connected station) models for the controller's stat/sta endpoint."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Meta(BaseModel):
    """Response envelope metadata; ``rc`` is "ok" on success."""

    rc: str = ""
    msg: str | None = None


class Client(BaseModel):
    """One connected device as reported by the controller.

    Every field has a zero value default so partially populated payloads
    (wired clients carry no radio data, for example) still validate.
    Keys that are not Python identifiers are carried by aliases and
    written back under the controller's names by ``model_dump(by_alias=True)``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(default="", alias="_id")
    mac: str = ""
    site_id: str = ""
    assoc_time: int = 0
    latest_assoc_time: int = 0
    oui: str = ""
    user_id: str = ""
    uptime: int = 0
    last_seen: int = 0
    is_wired: bool = False
    hostname: str = ""
    name: str = ""
    ip: str = ""
    essid: str = ""
    bssid: str = ""
    channel: int = 0
    radio: str = ""
    radio_name: str = ""
    radio_proto: str = ""
    rssi: int = 0
    signal: int = 0
    noise: int = 0
    tx_rate: int = 0
    rx_rate: int = 0
    tx_bytes: int = 0
    rx_bytes: int = 0
    tx_packets: int = 0
    rx_packets: int = 0
    tx_bytes_r: float = Field(default=0.0, alias="tx_bytes-r")
    rx_bytes_r: float = Field(default=0.0, alias="rx_bytes-r")
    satisfaction: int = 0
    note: str = ""
    ap_mac: str = ""
    sw_mac: str = ""
    sw_port: int = 0
    network: str = ""
    network_id: str = ""
    use_fixed_ip: bool = Field(default=False, alias="use_fixedip")
    fixed_ip: str = ""
    device_id_override: int = Field(default=0, alias="deviceIdOverride")
    blocked: bool = False
    qos_policy_applied: bool = False

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Controllers send null for unset attributes; read it as the zero value."""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @property
    def display_name(self) -> str:
        """Best available name: name, hostname, OUI (manufacturer), then MAC."""

        return self.name or self.hostname or self.oui or self.mac

    @property
    def connection_type(self) -> str:
        return "Wired" if self.is_wired else "Wireless"

    @property
    def ssid(self) -> str:
        """SSID for wireless clients, empty for wired ones."""

        return "" if self.is_wired else self.essid

    @property
    def signal_text(self) -> str:
        if not self.is_wired and self.signal != 0:
            return f"{self.signal} dBm"
        return ""


class ClientsResponse(BaseModel):
    """Envelope returned by ``stat/sta``."""

    meta: Meta
    data: List[Client] = Field(default_factory=list)


class SitesResponse(BaseModel):
    """Envelope returned by ``self/sites``; sites are kept as raw dicts."""

    meta: Meta
    data: List[dict[str, Any]] = Field(default_factory=list)


__all__ = ["Client", "ClientsResponse", "Meta", "SitesResponse"]
