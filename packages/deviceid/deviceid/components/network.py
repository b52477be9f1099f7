"""
MAC address component and the adapter selection it relies on.

Selection only looks at attributes that survive an interface being taken
down and up again (name, index, hardware address, device class), never at
link state, so the same adapters are chosen in the same order on every run.
"""

import logging
import os
import re
import socket
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol

import psutil

from ..component import Component
from ..config import config

logger = logging.getLogger(__name__)

PHYSICAL_ADDRESS_LENGTH = 6

_pattern_separated_address = re.compile(r'^[0-9a-fA-F]{2}([:-])(?:[0-9a-fA-F]{2}\1){4}[0-9a-fA-F]{2}$')
_pattern_bare_address = re.compile(r'^[0-9a-fA-F]{12}$')
# docker0 created by dockerd, br-<network id> for user defined networks
_pattern_docker_bridge = re.compile(r'^(docker\d*|br-[0-9a-f]{12})$')
_pattern_wireless_name = re.compile(r'^(wl|wlan|wifi|ath|ra\d)|wi-?fi|wireless|802\.11', re.IGNORECASE)
_pattern_tunnel_name = re.compile(r'^(lo\d*|tun\d*|tap\d*|utun\d*|gif\d*|stf\d*|wg\d*)$')


@dataclass(frozen=True)
class AdapterCandidate:
    name: str
    address: Optional[bytes]
    index: Optional[int] = None
    is_wireless: bool = False
    is_loopback_or_virtual: bool = False

    @property
    def formatted_address(self) -> str:
        return self.address.hex(':').upper() if self.address else ''


class AdapterSource(Protocol):

    def list_adapters(self) -> Iterable[AdapterCandidate]:
        ...


def parse_physical_address(text: Optional[str]) -> Optional[bytes]:
    '''"aa:bb:cc:dd:ee:ff", "AA-BB-CC-DD-EE-FF" or "aabbccddeeff" -> 6 bytes'''
    if not text:
        return None
    text = text.strip()
    if _pattern_separated_address.match(text):
        return bytes.fromhex(re.sub('[:-]', '', text))
    if _pattern_bare_address.match(text):
        return bytes.fromhex(text)
    return None


def is_docker_bridge(name: str) -> bool:
    return _pattern_docker_bridge.match(name) is not None


def _sort_key(candidate: AdapterCandidate):
    return (candidate.index is None, candidate.index or 0, candidate.address.hex())


def select_adapters(candidates: Iterable[AdapterCandidate],
                    exclude_wireless: bool = False,
                    exclude_docker_bridge: bool = False) -> List[AdapterCandidate]:
    """
    Keep the adapters that identify the machine, in a stable order.

    Adapters with a missing, all zero or wrong length address are dropped,
    as are loopback and virtual ones. The result is sorted by interface
    index (adapters without one last), then by address.

    Args:
        candidates: adapters reported by an `AdapterSource`
        exclude_wireless: also drop wireless adapters
        exclude_docker_bridge: also drop docker0 and br-<network id> bridges

    Returns:
        the selected adapters, possibly empty
    """
    selected = []
    for candidate in candidates:
        address = candidate.address
        if not address or len(address) != PHYSICAL_ADDRESS_LENGTH or not any(address):
            continue
        if candidate.is_loopback_or_virtual:
            continue
        if exclude_wireless and candidate.is_wireless:
            continue
        if exclude_docker_bridge and is_docker_bridge(candidate.name):
            continue
        selected.append(candidate)
    return sorted(selected, key=_sort_key)


class PsutilAdapterSource:
    """Adapters as reported by psutil, classified with sysfs where present."""

    def __init__(self, sysfs_root: Optional[str] = None):
        self._sysfs_root = sysfs_root or config.DEVICEID_SYSFS_NET_ROOT

    def _interface_indexes(self):
        try:
            return {name: index for index, name in socket.if_nameindex()}
        except OSError as e:
            logger.debug(f'if_nameindex failed: {e}')
            return {}

    def _is_wireless(self, name: str) -> bool:
        sysfs_path = os.path.join(self._sysfs_root, name)
        if os.path.isdir(sysfs_path):
            return os.path.exists(os.path.join(sysfs_path, 'wireless')) or \
                os.path.exists(os.path.join(sysfs_path, 'phy80211'))
        return _pattern_wireless_name.search(name) is not None

    def _is_loopback_or_virtual(self, name: str, stats) -> bool:
        flags = getattr(stats, 'flags', '') or ''
        flags = flags.split(',')
        if 'loopback' in flags or 'pointopoint' in flags:
            return True
        if _pattern_tunnel_name.match(name):
            return True
        sysfs_path = os.path.join(self._sysfs_root, name)
        if os.path.islink(sysfs_path):
            return '/virtual/' in os.path.realpath(sysfs_path)
        return False

    def list_adapters(self) -> List[AdapterCandidate]:
        indexes = self._interface_indexes()
        stats = psutil.net_if_stats()
        adapters = []
        for name, addrs in psutil.net_if_addrs().items():
            link_address = next((a.address for a in addrs if a.family == psutil.AF_LINK), None)
            adapters.append(
                AdapterCandidate(
                    name=name,
                    address=parse_physical_address(link_address),
                    index=indexes.get(name),
                    is_wireless=self._is_wireless(name),
                    is_loopback_or_virtual=self._is_loopback_or_virtual(name, stats.get(name)),
                ))
        return adapters


class MacAddressComponent(Component):

    def __init__(self,
                 exclude_wireless: bool = False,
                 exclude_docker_bridge: bool = False,
                 source: Optional[AdapterSource] = None):
        self._exclude_wireless = exclude_wireless
        self._exclude_docker_bridge = exclude_docker_bridge
        self._source = source or PsutilAdapterSource()

    def __repr__(self):
        return (f'MacAddressComponent(exclude_wireless={self._exclude_wireless}, '
                f'exclude_docker_bridge={self._exclude_docker_bridge})')

    def produce(self) -> Optional[str]:
        try:
            candidates = list(self._source.list_adapters())
        except Exception as e:
            logger.debug(f'cannot enumerate network adapters: {e}')
            return None
        selected = select_adapters(candidates,
                                   exclude_wireless=self._exclude_wireless,
                                   exclude_docker_bridge=self._exclude_docker_bridge)
        if not selected:
            return None
        logger.debug(f'selected adapters: {[a.name for a in selected]}')
        return ','.join(a.formatted_address for a in selected)
