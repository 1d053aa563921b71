"""Record a node walk to JSON and replay it, with profiling."""

from weft import BaseGenerator, NodeBuilder, NodeStream, StringSink, run
from weft.profiling import profiled_run
from weft.serialization import from_json, to_json


class Text(BaseGenerator):
    def __init__(self):
        self.sink = StringSink("text.txt")

    def stream(self, node):
        return self.sink

    def render(self, node):
        return node.value if node.is_text_content else ""


recording = to_json(NodeBuilder().open("para").text("Hello ").element("b", "world").close().build())

text = Text()
with profiled_run() as metrics:
    run(NodeStream(from_json(recording)), [text])

print(text.sink.getvalue())
print(metrics.summary())
