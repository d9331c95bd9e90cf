"""Proxy model - outbound proxy configuration for a device."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from ..database import Base, new_uuid

PROXY_TYPES = ("HTTP", "SOCKS5", "SOCKS4")


class Proxy(Base):
    """Proxy settings; at most one active proxy per device."""

    __tablename__ = "proxies"

    id = Column(String(36), primary_key=True, default=new_uuid)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False, index=True)
    type = Column(String, nullable=False)  # HTTP, SOCKS5, SOCKS4
    host = Column(String, nullable=False)
    port = Column(Integer, nullable=False)
    username = Column(String, nullable=True)
    password = Column(String, nullable=True)
    api_address = Column(String, nullable=True)  # rotation endpoint, if any
    country = Column(String, nullable=True)
    city = Column(String, nullable=True)
    fraud_score = Column(Integer, nullable=True)
    asn = Column(String, nullable=True)
    status = Column(String, nullable=False, default="active")  # active, archived
    batch_id = Column(String(36), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
