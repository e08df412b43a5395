"""Build a fragment by hand: open, text, close, finalize."""

from fsf import MarkupBuilder

b = MarkupBuilder()
b.open("ul")
for item in ("a", "b"):
    b.open("li").text(item).close()
b.close()
print(b.finalize())
