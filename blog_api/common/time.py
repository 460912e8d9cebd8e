def to_iso(value) -> str:
    # naive datetimes in the database are UTC
    return value.isoformat(timespec="milliseconds") + "Z"
