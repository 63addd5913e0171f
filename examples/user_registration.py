"""Example: validating a user registration, sync and async."""

from __future__ import annotations

import asyncio

from pydantic import BaseModel, EmailStr, Field

from maybe_pydantic import Schema, async_maybe, maybe


class Registration(BaseModel):
    username: str = Field(..., min_length=3, max_length=20)
    email: EmailStr
    password: str = Field(..., min_length=8)
    age: int = Field(..., ge=18, le=120)


registration_schema = (
    Schema(Registration)
    .refine(
        lambda r: any(c.isupper() for c in r.password),
        "Password must contain an uppercase letter",
        path=("password",),
    )
    .refine(
        lambda r: any(c.isdigit() for c in r.password),
        "Password must contain a digit",
        path=("password",),
    )
)

invalid_registration = {
    "username": "JD",
    "email": "john.doe",
    "password": "weakpass",
    "age": 17,
}

weak_password = {
    "username": "johndoe",
    "email": "john.doe@example.com",
    "password": "weakpassword",
    "age": 30,
}


def example_sync() -> None:
    """Every violated rule shows up in the diagnostics."""
    register = maybe(lambda r: r.username, registration_schema)

    error, _ = register(invalid_registration)
    print("User Registration Errors:", error)

    error, _ = register(weak_password)
    print("\nPassword Errors:", error)


async def example_async() -> None:
    """Same validation, with the payload arriving asynchronously."""

    async def fetch_registration() -> dict[str, object]:
        await asyncio.sleep(0.01)
        return invalid_registration

    register = async_maybe(lambda r: r.username, registration_schema)
    error, _ = await register(fetch_registration())
    print("\nAsync User Registration Errors:", error)


if __name__ == "__main__":
    example_sync()
    asyncio.run(example_async())
