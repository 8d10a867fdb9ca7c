from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Geo(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: str
    lng: str


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str
    suite: str
    city: str
    zipcode: str
    geo: Geo


class Company(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    catch_phrase: str = Field(alias="catchPhrase")
    bs: str


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    username: str
    email: str
    phone: str
    website: str
    address: Address
    company: Company


UserList = TypeAdapter(List[User])
