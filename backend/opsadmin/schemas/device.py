"""Device and credential asset schemas."""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

ProxyType = Literal["HTTP", "SOCKS5", "SOCKS4"]
SocialPlatform = Literal["TikTok", "Instagram", "Snapchat"]


class DeviceCreate(BaseModel):
    """Schema for registering a device."""
    device_model: str = Field(..., min_length=1, pattern=r"\S")
    manager_id: Optional[str] = None
    owner: Optional[str] = None


class DeviceUpdate(BaseModel):
    device_id: int
    device_model: Optional[str] = Field(None, min_length=1, pattern=r"\S")
    manager_id: Optional[str] = None
    owner: Optional[str] = None


class DeviceResponse(BaseModel):
    id: int
    device_model: str
    manager_id: Optional[str] = None
    owner: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ICloudProfileFields(BaseModel):
    """Fields shared by iCloud profile create and update forms."""
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., min_length=1)
    credentials: str = Field(..., min_length=1)
    alias: str = Field(..., min_length=1)
    birth_date: str = Field(..., min_length=1, alias="birthDate")
    country: str = Field(..., min_length=1)
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1, alias="zipCode")


class ICloudProfileCreate(ICloudProfileFields):
    device_id: int


class ICloudProfileUpdate(ICloudProfileFields):
    profile_id: str = Field(..., min_length=1, alias="profileId")


class ICloudProfileArchive(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    profile_id: str = Field(..., min_length=1, alias="profileId")


class ICloudProfileResponse(BaseModel):
    id: str
    device_id: int
    email: str
    credentials: str
    alias: str
    birth_date: str
    country: str
    street: str
    city: str
    zip_code: str
    status: str
    batch_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SocialAccountCreate(BaseModel):
    device_id: int
    platform: SocialPlatform
    username: str = Field(..., min_length=1)
    credentials: str = Field(..., min_length=1)
    name: Optional[str] = None


class SocialAccountUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(..., min_length=1, alias="accountId")
    platform: SocialPlatform
    username: str = Field(..., min_length=1)
    credentials: str = Field(..., min_length=1)
    name: Optional[str] = None
    # Archiving goes through the archive endpoint
    status: Optional[Literal["draft", "active"]] = None


class SocialAccountArchive(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    account_id: str = Field(..., min_length=1, alias="accountId")


class SocialAccountResponse(BaseModel):
    id: str
    device_id: int
    platform: str
    username: str
    name: Optional[str] = None
    credentials: str
    status: str
    batch_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ProxyFields(BaseModel):
    type: ProxyType
    host: str = Field(..., min_length=1)
    port: int = Field(..., ge=1, le=65535)
    username: Optional[str] = None
    password: Optional[str] = None
    api_address: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    fraud_score: Optional[int] = None
    asn: Optional[str] = None


class ProxyCreate(ProxyFields):
    device_id: int


class ProxyUpdate(ProxyFields):
    model_config = ConfigDict(populate_by_name=True)

    proxy_id: str = Field(..., min_length=1, alias="proxyId")


class ProxyArchive(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    proxy_id: str = Field(..., min_length=1, alias="proxyId")


class ProxyResponse(BaseModel):
    id: str
    device_id: int
    type: str
    host: str
    port: int
    username: Optional[str] = None
    password: Optional[str] = None
    api_address: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    fraud_score: Optional[int] = None
    asn: Optional[str] = None
    status: str
    batch_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class DeviceWithRelations(BaseModel):
    """A device with its live and archived credential assets."""
    device: DeviceResponse
    icloud_profile: Optional[ICloudProfileResponse] = None
    archived_icloud_profiles: List[ICloudProfileResponse] = []
    social_accounts: List[SocialAccountResponse] = []
    archived_social_accounts: List[SocialAccountResponse] = []
    proxy: Optional[ProxyResponse] = None
    archived_proxies: List[ProxyResponse] = []


class BatchGroupResponse(BaseModel):
    """Archived assets that were burned together."""
    batch_id: str  # "no-batch" for assets that never got one
    profile: Optional[ICloudProfileResponse] = None
    social_accounts: List[SocialAccountResponse] = []
    proxy: Optional[ProxyResponse] = None
    extra_profiles: List[ICloudProfileResponse] = []
    extra_proxies: List[ProxyResponse] = []


class DeviceBatches(BaseModel):
    device_id: int
    batches: List[BatchGroupResponse]
