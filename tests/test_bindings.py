"""
Tests for event bindings and the presentation surface.
"""

import logging

import pytest
from hiccpy import (
    DATA_ID,
    Binding,
    ContainerNotFound,
    NullValueError,
    RenderConfig,
    Renderer,
    RenderResult,
    Surface,
    cleanup,
    default_surface,
    render,
)
from hiccpy.bindings import BindingRecorder


def noop(event=None):
    return event


@pytest.fixture
def surface():
    surface = Surface()
    surface.mount("app")
    return surface


class TestRender:
    def test_plain_markup_without_handlers(self):
        result = render(["div", "Hello"])
        assert isinstance(result, RenderResult)
        assert result.markup == "<div>Hello</div>"
        assert result.bindings == []

    def test_marker_attribute(self):
        result = render(["button", {"on:click": noop}, "Click"])
        assert result.markup == f'<button {DATA_ID}="hiccpy-1">Click</button>'
        assert result.bindings == [Binding("hiccpy-1", {"click": noop})]

    def test_marker_after_other_attributes(self):
        result = render(["button#b.btn", {"on:click": noop, "type": "button"}])
        assert result.markup == (
            '<button id="b" class="btn" type="button" data-hiccpy-id="hiccpy-1"></button>'
        )

    def test_ids_in_document_order(self):
        result = render(
            [
                "div",
                ["button", {"on:click": noop}, "A"],
                ["p", "no handlers"],
                ["input", {"on:input": noop}],
            ]
        )
        assert [binding.id for binding in result.bindings] == ["hiccpy-1", "hiccpy-2"]
        assert 'data-hiccpy-id="hiccpy-2"' in result.markup

    def test_ids_restart_per_render(self):
        first = render(["button", {"on:click": noop}])
        second = render(["button", {"on:click": noop}])
        assert first.bindings[0].id == second.bindings[0].id == "hiccpy-1"

    def test_multiple_events_one_element(self):
        def over(event):
            return "over"

        result = render(["div", {"on:mouseOver": over, "on:click": noop}])
        assert len(result.bindings) == 1
        assert result.bindings[0].events == {"mouseOver": over, "click": noop}

    def test_non_callable_handlers_dropped(self):
        result = render(["div", {"on:hover": 123, "on:invalid": "nope"}])
        assert result.markup == "<div></div>"
        assert result.bindings == []

    def test_none_handler_raises(self):
        with pytest.raises(NullValueError):
            render(["div", {"on:click": None}])

    def test_handlers_inside_components(self):
        def Counter(children):
            return ["button", {"on:click": noop}, *children]

        result = render(["div", [Counter, "+1"], [Counter, "-1"]])
        assert [binding.id for binding in result.bindings] == ["hiccpy-1", "hiccpy-2"]

    def test_custom_id_prefix(self):
        renderer = Renderer(RenderConfig(id_prefix="ev-"))
        result = renderer.render(["a", {"on:click": noop}])
        assert result.markup == '<a data-hiccpy-id="ev-1"></a>'

    def test_result_is_renderable(self):
        inner = render(["b", "x"])
        assert str(inner) == "<b>x</b>"
        assert render(["p", inner]).markup == "<p><b>x</b></p>"

    def test_html_result_unaffected(self):
        renderer = Renderer()
        assert renderer.html(["button", {"on:click": noop}]) == "<button></button>"


class TestBindingRecorder:
    def test_sequence(self):
        recorder = BindingRecorder("x-")
        assert recorder.record({"click": noop}) == "x-1"
        assert recorder.next_id() == "x-2"
        assert recorder.record({"click": noop}) == "x-3"
        assert [binding.id for binding in recorder.bindings] == ["x-1", "x-3"]

    def test_events_copied(self):
        events = {"click": noop}
        recorder = BindingRecorder()
        recorder.record(events)
        events.clear()
        assert recorder.bindings[0].events == {"click": noop}


class TestSurface:
    def test_mount_is_idempotent(self, surface):
        assert surface.mount("#app") is surface.mount("app")
        assert list(surface.containers) == ["app"]

    def test_resolve_missing(self, surface):
        with pytest.raises(ContainerNotFound, match='Container "#nope" not found') as exc_info:
            surface.resolve("#nope")
        assert exc_info.value.context == {"selector": "#nope"}
        assert exc_info.value.code == "CONTAINER_NOT_FOUND"

    def test_unmount(self, surface):
        surface.unmount("#app")
        with pytest.raises(ContainerNotFound):
            surface.resolve("app")

    def test_write_replaces_content(self, surface):
        surface.write("app", "<p>one</p>")
        container = surface.write("#app", "<p>two</p>")
        assert container.content == "<p>two</p>"
        assert container.__html__() == "<p>two</p>"


class TestAttach:
    def test_attach_and_dispatch(self, surface):
        clicks = []
        result = render(["button", {"on:click": clicks.append}, "Go"])

        container = result.attach("#app", surface)
        assert container.content == result.markup

        assert container.dispatch("hiccpy-1", "click", {"x": 1}) == [None]
        assert clicks == [{"x": 1}]

    def test_dispatch_returns_handler_results(self, surface):
        result = render(["button", {"on:click": lambda event: f"got {event}"}])
        container = result.attach("app", surface)
        assert container.dispatch("hiccpy-1", "click", "e") == ["got e"]

    def test_dispatch_unknown_event(self, surface):
        result = render(["button", {"on:click": noop}])
        container = result.attach("app", surface)
        assert container.dispatch("hiccpy-1", "keydown") == []
        assert container.dispatch("hiccpy-9", "click") == []

    def test_event_name_case_preserved(self, surface):
        result = render(["div", {"on:mouseOver": noop}])
        container = result.attach("app", surface)
        assert container.handlers("hiccpy-1", "mouseOver") == [noop]
        assert container.handlers("hiccpy-1", "mouseover") == []

    def test_attach_missing_container(self, surface):
        with pytest.raises(ContainerNotFound):
            render(["div"]).attach("#missing", surface)

    def test_attach_container_object(self, surface):
        container = surface.resolve("app")
        assert render(["i", "x"]).attach(container, surface) is container

    def test_missing_element_skipped(self, surface, caplog):
        binding = Binding("hiccpy-7", {"click": noop})
        with caplog.at_level(logging.WARNING, logger="hiccpy.surface"):
            container = surface.attach("app", "<div></div>", [binding])
        assert container.handlers("hiccpy-7", "click") == []
        assert "Element hiccpy-7 not found" in caplog.text

    def test_prefix_with_markup_characters(self, surface):
        renderer = Renderer(RenderConfig(id_prefix='a&b"<'))
        result = renderer.render(["button", {"on:click": noop}])
        assert result.markup == '<button data-hiccpy-id="a&amp;b&quot;&lt;1"></button>'

        container = result.attach("app", surface)
        assert container.handlers('a&b"<1', "click") == [noop]

    def test_reattach_drops_old_listeners(self, surface):
        first = render(["button", {"on:click": noop}])
        first.attach("app", surface)
        container = render(["p", "static"]).attach("app", surface)
        assert container.listeners == {}
        assert container.content == "<p>static</p>"

    def test_default_surface(self):
        default_surface.mount("main")
        try:
            container = render(["button", {"on:click": noop}]).attach("main")
            assert container.handlers("hiccpy-1", "click") == [noop]
        finally:
            default_surface.unmount("main")


class TestCleanup:
    def test_cleanup_clears_content_and_listeners(self, surface):
        render(["button", {"on:click": noop}]).attach("app", surface)
        container = cleanup("#app", surface)
        assert container.content == ""
        assert container.listeners == {}
        assert container.dispatch("hiccpy-1", "click") == []

    def test_cleanup_missing_container(self, surface):
        with pytest.raises(ContainerNotFound):
            cleanup("#missing", surface)

    def test_cleanup_default_surface(self):
        default_surface.mount("side", "<p>x</p>")
        try:
            assert cleanup("side").content == ""
        finally:
            default_surface.unmount("side")
