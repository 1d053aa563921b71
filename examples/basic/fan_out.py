"""One walk, two outputs — an HTML page and a function index."""

from weft import BaseGenerator, Factory, NodeBuilder, RenderConfig, StringSinkFactory, run

config = RenderConfig()
factory = Factory(config)
sinks = StringSinkFactory(config)


class Page(BaseGenerator):
    def stream(self, node):
        return sinks.make("strlen.html")

    def render(self, node):
        if node.is_opening_element:
            tag = {"refentry": "article", "refname": "h1", "para": "p"}.get(node.name, "span")
            return factory.tag(tag, {"class": node.name})
        return node.value


class FunctionIndex(BaseGenerator):
    """Lists each function name together with its parameter count."""

    def __init__(self):
        self.params = 0

    def stream(self, node):
        return sinks.make("functions.txt")

    def render(self, node):
        if node.is_opening_element and node.name == "refentry":
            self.params = 0
            return factory.wrapper(after=factory.lazy(lambda: f" ({self.params} params)\n"))
        if node.is_opening_element and node.name == "parameter":
            self.params += 1
        if node.is_text_content and node.parent("refname"):
            return node.value
        return ""


doc = (
    NodeBuilder()
    .open("refentry")
    .element("refname", "strlen")
    .open("para")
    .element("parameter", "string")
    .close_all()
)
run(doc.stream(), [Page(), FunctionIndex()])

for sink in sinks.sinks:
    print(sink.path, "->", sink.getvalue())
