"""Register a custom formatter next to the built-in ones.

Samples that name an unknown dialect still render, with the default rules.
"""

from lilac import (
    Formatter,
    FormatterRegistryBuilder,
    JavascriptFormatter,
    LavendeuxFormatter,
    Rule,
    load_samples,
    render_samples,
)

ini = Formatter(
    "ini",
    [
        Rule.compile(r"[;#].*", "comment"),
        Rule.compile(r"^\[[^\]\n]+\]", "decorator"),
        Rule.compile(r"^[\w.-]+(?=\s*=)", "data"),
    ],
)

registry = (
    FormatterRegistryBuilder()
    .register(LavendeuxFormatter())
    .register(JavascriptFormatter())
    .register(ini)
    .build()
)

batch = load_samples(
    {
        "samples": [
            {
                "name": "Settings",
                "formatter": "ini",
                "text": ["[main]", "hotkey = ctrl+space ; default"],
            },
            {"name": "Fallback", "formatter": "cobol", "text": "sqrt(0x10)"},
        ]
    }
)

for sample, html in zip(batch, render_samples(batch, registry)):
    print(f"{sample.name}: {html}")
