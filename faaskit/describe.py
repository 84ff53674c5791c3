"""Describing a deployed function."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FunctionDescription:
    """Details of a deployed function as shown to the user."""

    name: str
    status: str
    replicas: int
    available_replicas: int
    invocation_count: int
    image: str
    env_process: str
    url: str
    async_url: str
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None


def function_urls(gateway: str, function_name: str) -> tuple[str, str]:
    """Return the synchronous and asynchronous URLs of a function."""
    gateway = gateway.rstrip("/")
    return (
        f"{gateway}/function/{function_name}",
        f"{gateway}/async-function/{function_name}",
    )


def _align(text: str, padding: int = 1) -> str:
    """Align tab-separated cells into columns padded with spaces."""
    lines = [line.split("\t") for line in text.split("\n")]
    out: list[str] = []
    widths: list[int] = []

    def write(start: int, end: int) -> None:
        for cells in lines[start:end]:
            parts = []
            for column, cell in enumerate(cells):
                if column < len(widths) and column < len(cells) - 1:
                    parts.append(cell.ljust(widths[column]))
                else:
                    parts.append(cell)
            out.append("".join(parts))

    def fmt(start: int, end: int) -> None:
        column = len(widths)
        row = start
        while row < end:
            if column >= len(lines[row]) - 1:
                row += 1
                continue
            write(start, row)
            start = row
            width = 0
            while row < end and column < len(lines[row]) - 1:
                width = max(width, len(lines[row][column]) + padding)
                row += 1
            widths.append(width)
            fmt(start, row)
            widths.pop()
            start = row
        write(start, end)

    fmt(0, len(lines))
    return "\n".join(out)


def format_function_description(description: FunctionDescription) -> str:
    """Render ``description`` as aligned ``label: value`` lines."""
    text = "".join(
        f"{label}\t {value}\n"
        for label, value in (
            ("Name:", description.name),
            ("Status:", description.status),
            ("Replicas:", str(description.replicas)),
            ("Available replicas:", str(description.available_replicas)),
            ("Invocations:", str(description.invocation_count)),
            ("Image:", description.image),
            ("Function process:", description.env_process),
            ("URL:", description.url),
            ("Async URL:", description.async_url),
        )
    )
    for heading, entries in (
        ("Labels:", description.labels),
        ("Annotations:", description.annotations),
    ):
        if entries is not None:
            text += heading
            text += "".join(f" \t {key} : {value}\n" for key, value in entries.items())
    return _align(text)