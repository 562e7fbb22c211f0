"""Highlight a snippet, then render the bundled documentation samples."""

from lilac import get_sample_html, highlight, load_bundled_samples

print(highlight("x = 0xFFA & 0xFF0 // mask"))
print(get_sample_html(load_bundled_samples()))
