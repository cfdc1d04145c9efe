"""Bookmark config file access."""

from bo.gateway.config_store.abc import ConfigStore as ConfigStore
from bo.gateway.config_store.fake import FakeConfigStore as FakeConfigStore
from bo.gateway.config_store.real import RealConfigStore as RealConfigStore
