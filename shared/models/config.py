from pydantic import BaseModel


class EnvConfig(BaseModel):
    """
    A single environment setting a backend client depends on.

    Attributes:
        env_key (str): Key suffix of the variable; the client prefixes it with its type (e.g. "TIMEOUT" -> "ATS_TIMEOUT").
        val_type (str): Expected value type. Clients currently read "string" values only.
        default (str | int | float | bool | list | None): Fallback value. None marks the setting as required.
    """

    env_key: str
    val_type: str
    default: str | int | float | bool | list | None = None
