# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for HtmlNode, HtmlDocument and the attribute setters."""

import pytest

from genro_domtree import (
    HtmlDocument,
    HtmlNode,
    IfElseNode,
    InvalidTagError,
    SafeString,
    VoidElementError,
)
from genro_domtree.html import ATTRIBUTE_NAMES, RAW_ATTRIBUTE, VOID_TAGS
from genro_domtree.html.attributes import attr_name, setter_name


class TestHtmlNodeBasic:
    """Basic construction and rendering of HtmlNode."""

    def test_element_with_attributes_and_children(self):
        """Test the canonical div example."""
        node = HtmlNode('div', {'class': 'box'}, ['Hello'])
        assert str(node) == '<div class="box">Hello</div>'

    def test_empty_element(self):
        """Test an element without attributes or children."""
        assert str(HtmlNode('div')) == '<div></div>'

    def test_empty_tag_name_raises(self):
        """Test an empty tag name is rejected."""
        with pytest.raises(InvalidTagError, match="tag name"):
            HtmlNode('')

    def test_nested_elements(self):
        """Test nested elements render in order with no separator."""
        ul = HtmlNode('ul', {'class': 'menu'})(
            HtmlNode('li', None, ['Item 1']),
            HtmlNode('li', None, ['Item 2']),
        )
        assert str(ul) == '<ul class="menu"><li>Item 1</li><li>Item 2</li></ul>'

    def test_children_escaped(self):
        """Test text children are escaped inside elements."""
        node = HtmlNode('div', None, ['<script>alert("xss")</script>'])
        assert str(node) == (
            '<div>&lt;script&gt;alert(&quot;xss&quot;)&lt;/script&gt;</div>'
        )

    def test_safe_string_child(self):
        """Test SafeString children are not escaped."""
        node = HtmlNode('div', None, [SafeString('<strong>Important</strong>')])
        assert str(node) == '<div><strong>Important</strong></div>'

    def test_thunk_child_receives_element(self):
        """Test callable children get the element."""
        node = HtmlNode('span', {'id': 'x'}, [lambda el: el.get_attr('id')])
        assert str(node) == '<span id="x">x</span>'

    def test_repr(self):
        """Test string representation."""
        assert repr(HtmlNode('p', {'id': 'a'}, ['x'])) == "HtmlNode('p', attrs=['id'], children=1)"


class TestVoidElements:
    """Tests for void elements."""

    def test_void_input(self):
        """Test a void input with a boolean attribute."""
        node = HtmlNode('input', {'type': 'checkbox', 'checked': True}, is_void=True)
        assert str(node) == '<input type="checkbox" checked>'

    def test_append_to_void_raises(self):
        """Test appending a child to a void element fails."""
        node = HtmlNode('input', {'type': 'checkbox'}, is_void=True)
        with pytest.raises(VoidElementError, match="<input>"):
            node.append_child('x')
        with pytest.raises(VoidElementError):
            node('x')

    def test_construct_void_with_children_raises(self):
        """Test construction applies the same void check."""
        with pytest.raises(VoidElementError):
            HtmlNode('br', None, ['x'], is_void=True)

    def test_append_none_to_void_is_noop(self):
        """Test None is still ignored for void elements."""
        node = HtmlNode('br', is_void=True).append_child(None)
        assert str(node) == '<br>'

    @pytest.mark.parametrize('tag', sorted(VOID_TAGS))
    def test_every_void_tag(self, tag):
        """Test each void tag refuses children and has no closing tag."""
        node = HtmlNode.tag(tag, None, None, True)
        with pytest.raises(VoidElementError):
            node.append_child(HtmlNode('span'))
        assert str(node) == f'<{tag}>'
        assert '</' not in str(node)


class TestAttributes:
    """Tests for attribute rendering and access."""

    def test_boolean_attribute_true(self):
        """Test disabled=True renders a bare name."""
        assert str(HtmlNode('button', {'disabled': True})) == '<button disabled></button>'

    def test_boolean_attribute_false(self):
        """Test disabled=False is omitted."""
        assert str(HtmlNode('button', {'disabled': False})) == '<button></button>'

    def test_boolean_attribute_truthy_value(self):
        """Test a truthy non-bool value on a boolean attribute gives a bare name."""
        assert str(HtmlNode('option', {'selected': 'yes'})) == '<option selected></option>'

    def test_non_boolean_attribute_true(self):
        """Test True on any attribute renders a bare name."""
        assert str(HtmlNode('div', {'data-flag': True})) == '<div data-flag></div>'

    def test_non_boolean_attribute_false(self):
        """Test False on a non-boolean attribute is rendered as a value."""
        assert str(HtmlNode('div', {'draggable': False})) == '<div draggable="false"></div>'

    def test_none_attribute_omitted(self):
        """Test None values are omitted."""
        assert str(HtmlNode('div', {'id': None, 'title': 't'})) == '<div title="t"></div>'

    def test_attribute_escaping(self):
        """Test keys and values are escaped."""
        node = HtmlNode('a', {'title': 'Tom & "Jerry"', 'x<y': 1})
        assert str(node) == '<a title="Tom &amp; &quot;Jerry&quot;" x&lt;y="1"></a>'

    def test_raw_attribute_string(self):
        """Test the raw attribute is emitted verbatim."""
        node = HtmlNode('div', {RAW_ATTRIBUTE: 'class="container" data-show="1"'})
        assert str(node) == '<div class="container" data-show="1"></div>'

    def test_attribute_order_preserved(self):
        """Test attributes render in insertion order."""
        node = HtmlNode('img', {'src': 'photo.jpg', 'alt': 'Description'}, is_void=True)
        assert str(node) == '<img src="photo.jpg" alt="Description">'

    def test_thunk_attribute(self):
        """Test callable attribute values are called with the element."""
        node = HtmlNode('div', {'data-tag': lambda el: el.tag_name, 'hidden': lambda: False})
        assert str(node) == '<div data-tag="div"></div>'

    def test_thunk_attribute_evaluated_each_render(self):
        """Test attribute callables are not memoized."""
        counter = iter(range(10))
        node = HtmlNode('div', {'data-n': lambda: next(counter)})
        assert str(node) == '<div data-n="0"></div>'
        assert str(node) == '<div data-n="1"></div>'

    def test_get_and_set_attr(self):
        """Test set_attr chaining and get_attr defaults."""
        node = HtmlNode('div')
        assert node.set_attr('id', 'main') is node
        assert node.get_attr('id') == 'main'
        assert node.get_attr('missing') is None
        assert node.get_attr('missing', 'default') == 'default'
        assert node.get_attr() == {'id': 'main'}

    def test_set_attrs_keyword_names(self):
        """Test set_attrs converts keyword names."""
        node = HtmlNode('div').set_attrs({'id': 'a'}, class_='box', data_status='open')
        assert node.attr == {'id': 'a', 'class': 'box', 'data-status': 'open'}


class TestClasses:
    """Tests for classes()."""

    def test_mixed_arguments(self):
        """Test strings and condition mappings combine in order."""
        node = HtmlNode('div').classes('a', {'b': True, 'c': False}, 'd')
        assert node.get_attr('class') == 'a b d'

    def test_list_argument(self):
        """Test list arguments add every name."""
        node = HtmlNode('div').classes(['a', 'b'], 'c')
        assert node.get_attr('class') == 'a b c'

    def test_overwrites_existing_class(self):
        """Test classes() replaces the class attribute."""
        node = HtmlNode('div', {'class': 'old'}).classes('new')
        assert str(node) == '<div class="new"></div>'

    def test_deduplicates_keeping_first_position(self):
        """Test a repeated name keeps its first position and last condition."""
        node = HtmlNode('div').classes('a', 'b', {'a': False}, {'a': True})
        assert node.get_attr('class') == 'a b'

    def test_later_condition_disables(self):
        """Test a later falsy condition removes a name."""
        node = HtmlNode('div').classes('a', 'b', {'a': 0})
        assert node.get_attr('class') == 'b'

    def test_int_keys_in_mapping(self):
        """Test positional entries of a mapping are class names."""
        node = HtmlNode('div').classes({0: 'a', 'b': True})
        assert node.get_attr('class') == 'a b'

    def test_no_arguments(self):
        """Test classes() without arguments leaves the element unchanged."""
        node = HtmlNode('div', {'class': 'keep'})
        assert node.classes() is node
        assert node.get_attr('class') == 'keep'


class TestAttributeSetters:
    """Tests for the generated attribute setter methods."""

    def test_setter_names(self):
        """Test setter naming rules."""
        assert setter_name('href') == 'href'
        assert setter_name('accept-charset') == 'accept_charset'
        assert setter_name('class') == 'class_'
        assert setter_name('for') == 'for_'
        assert setter_name('async') == 'async_'

    def test_attr_names(self):
        """Test keyword to attribute name conversion."""
        assert attr_name('class_') == 'class'
        assert attr_name('data_status') == 'data-status'
        assert attr_name('href') == 'href'

    def test_every_setter_installed(self):
        """Test each table entry has a method on HtmlNode."""
        for attr in ATTRIBUTE_NAMES:
            assert callable(getattr(HtmlNode, setter_name(attr)))

    def test_fluent_setters(self):
        """Test setters chain and set the right keys."""
        node = (
            HtmlNode('a')
            .href('/home')
            .title('Home')
            .class_('nav')
            .http_equiv('x')
            .id('home')
        )
        assert node.attr == {
            'href': '/home',
            'title': 'Home',
            'class': 'nav',
            'http-equiv': 'x',
            'id': 'home',
        }

    def test_boolean_setter_defaults_true(self):
        """Test boolean setters default to True."""
        node = HtmlNode('input', is_void=True).type('text').required().disabled(False)
        assert str(node) == '<input type="text" required>'

    def test_setter_metadata(self):
        """Test generated setters carry a name and a docstring."""
        assert HtmlNode.for_.__name__ == 'for_'
        assert "'for'" in HtmlNode.for_.__doc__


class TestTagFactory:
    """Tests for HtmlNode.tag argument resolution."""

    def test_string_first_arg_is_raw_attribute(self):
        """Test a string first argument becomes the raw attribute."""
        node = HtmlNode.tag('div', 'class="box"', ['Hello'])
        assert str(node) == '<div class="box">Hello</div>'

    def test_list_first_arg_is_children(self):
        """Test a list first argument is the children; children arg ignored."""
        node = HtmlNode.tag('div', ['a', 'b'], ['ignored'])
        assert str(node) == '<div>ab</div>'

    def test_mapping_first_arg_is_attributes(self):
        """Test a mapping first argument is the attributes."""
        node = HtmlNode.tag('div', {'id': 'x'}, ['c'])
        assert str(node) == '<div id="x">c</div>'

    def test_mapping_zero_key_promoted(self):
        """Test a 0 key is promoted to the raw attribute."""
        node = HtmlNode.tag('div', {0: 'data-a="1"', 'id': 'x'})
        assert node.attr == {'id': 'x', RAW_ATTRIBUTE: 'data-a="1"'}
        assert str(node) == '<div id="x" data-a="1"></div>'

    def test_mapping_zero_key_not_promoted_over_raw(self):
        """Test an explicit raw attribute is kept."""
        node = HtmlNode.tag('div', {0: 'a', RAW_ATTRIBUTE: 'b'})
        assert node.get_attr(RAW_ATTRIBUTE) == 'b'
        assert node.get_attr(0) == 'a'

    def test_none_first_arg_uses_children(self):
        """Test None first argument falls back to children."""
        assert str(HtmlNode.tag('p', None, ['x'])) == '<p>x</p>'
        assert str(HtmlNode.tag('p')) == '<p></p>'

    def test_other_first_arg_is_single_child(self):
        """Test any other value becomes the only child."""
        assert str(HtmlNode.tag('p', 42)) == '<p>42</p>'
        inner = HtmlNode('b')
        node = HtmlNode.tag('p', inner)
        assert node.children == [inner]
        assert inner.parent is node

    def test_tag_returns_subclass(self):
        """Test tag() builds instances of the class it is called on."""
        assert isinstance(HtmlDocument.tag('html', None), HtmlDocument)


class TestToDict:
    """Tests for the structural snapshot."""

    def test_snapshot(self):
        """Test attribute thunks are evaluated and HtmlNodes recursed."""
        calls = []

        def child_thunk():
            calls.append('child')
            return 'lazy'

        span = HtmlNode('span', {'class': lambda: 'dyn'}, ['x'])
        div = HtmlNode('div', {'id': 'root'}, ['text', span, child_thunk])
        snapshot = div.to_dict()

        assert snapshot == {
            'tag_name': 'div',
            'attrs': {'id': 'root'},
            'children': [
                'text',
                {
                    'tag_name': 'span',
                    'attrs': {'class': 'dyn'},
                    'children': ['x'],
                    'is_void': False,
                },
                child_thunk,
            ],
            'is_void': False,
        }
        assert calls == []

    def test_snapshot_passes_other_nodes_through(self):
        """Test non-element node children are not snapshotted."""
        branch = IfElseNode(['x'], condition=True)
        snapshot = HtmlNode('div', None, [branch]).to_dict()
        assert snapshot['children'] == [branch]


class TestHtmlDocument:
    """Tests for HtmlDocument."""

    def test_doctype_prefix(self):
        """Test the doctype line precedes the html element."""
        doc = HtmlDocument(attrs={'lang': 'en'})(
            HtmlNode('head'),
            HtmlNode('body', None, ['Hello']),
        )
        assert str(doc) == (
            '<!DOCTYPE html>\n'
            '<html lang="en"><head></head><body>Hello</body></html>'
        )

    def test_empty_document(self):
        """Test an empty document still has the doctype line."""
        doc = HtmlDocument()
        assert str(doc) == '<!DOCTYPE html>\n<html></html>'

    def test_is_html_node(self):
        """Test HtmlDocument behaves like an HtmlNode otherwise."""
        doc = HtmlDocument().lang('it')
        assert isinstance(doc, HtmlNode)
        assert doc.get_attr('lang') == 'it'
        assert doc.tag_name == 'html'
