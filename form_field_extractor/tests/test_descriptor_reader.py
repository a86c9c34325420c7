"""
Tests for turning a PDF AcroForm into descriptor lines.
"""

from io import BytesIO

import pytest
from pypdf.errors import PdfReadError

from form_field_extractor.analyzer.pdf_field_adapter import PDFFieldAdapter
from form_field_extractor.errors import StructuralParseError
from form_field_extractor.pdf import descriptor_reader
from form_field_extractor.pdf.descriptor_reader import DescriptorReader


class FakeReader:
    """PdfReader double: fixed get_fields() result and page annotations."""
    
    fields = {}
    pages = []
    
    def __init__(self, stream):
        self.stream = stream
    
    def get_fields(self):
        return self.fields


def _use_reader(monkeypatch, fields, pages=()):
    reader = type("Reader", (FakeReader,), {'fields': fields, 'pages': list(pages)})
    monkeypatch.setattr(descriptor_reader, "PdfReader", reader)


@pytest.mark.parametrize("field,expected", [
    ({'/FT': '/Tx'}, 'text'),
    ({'/FT': '/Btn'}, 'checkbox'),
    ({'/FT': '/Btn', '/Ff': 1 << 15}, 'radio'),
    ({'/FT': '/Btn', '/Ff': 1 << 16}, 'pushbutton'),
    ({'/FT': '/Ch', '/Ff': 1 << 17}, 'combo'),
    ({'/FT': '/Ch'}, 'listbox'),
    ({'/FT': '/Sig'}, 'signature'),
    ({'/FT': '/Foo'}, 'foo'),
    ({}, 'unknown'),
])
def test_field_type(field, expected):
    assert DescriptorReader.field_type(field) == expected


def test_field_type_is_inherited_from_parent():
    parent = {'/FT': '/Btn', '/Ff': 1 << 15}
    
    assert DescriptorReader.field_type({'/T': 'choice', '/Parent': parent}) == 'radio'


def test_read_builds_descriptor_lines(monkeypatch):
    parent = {'/T': 'owner', '/Kids': []}
    widget = {'/Subtype': '/Widget', '/T': 'Name_2', '/Parent': parent}
    parent['/Kids'] = [widget]
    fields = {
        'owner': parent,
        'owner.Name_2': {'/T': 'Name_2', '/FT': '/Tx', '/Parent': parent},
        'agree': {'/T': 'agree', '/FT': '/Btn'},
    }
    pages = [{'/Annots': [widget]}, {}]
    _use_reader(monkeypatch, fields, pages)
    
    descriptors = DescriptorReader.read(BytesIO(b""), "form.pdf")
    
    assert descriptors == [
        "1 1 text 1 owner.Name_2",
        "2 0 checkbox 2 agree",
    ]


def test_radio_group_widgets_without_names_are_one_field(monkeypatch):
    group = {'/T': 'color', '/FT': '/Btn', '/Ff': 1 << 15}
    group['/Kids'] = [
        {'/Subtype': '/Widget', '/Parent': group},
        {'/Subtype': '/Widget', '/Parent': group},
    ]
    _use_reader(monkeypatch, {'color': group}, [{'/Annots': group['/Kids']}])
    
    assert DescriptorReader.read(BytesIO(b"")) == ["1 1 radio 1 color"]


def test_descriptors_feed_the_adapter(monkeypatch):
    _use_reader(monkeypatch, {
        'Date of Birth_3': {'/FT': '/Tx'},
        '"Make}': {'/FT': '/Tx'},
    })
    
    fields = PDFFieldAdapter.from_descriptors(DescriptorReader.read(BytesIO(b"")))
    
    assert [(f.name, f.label) for f in fields] == [
        ("Date of Birth_3", "Date of Birth (3)"),
        ("Make", "Make"),
    ]


@pytest.mark.parametrize("fields", [None, {}])
def test_document_without_fields_is_structural_error(monkeypatch, fields):
    _use_reader(monkeypatch, fields)
    
    with pytest.raises(StructuralParseError, match="no form fields"):
        DescriptorReader.read(BytesIO(b""), "empty.pdf")


def test_reader_failure_is_structural_error(monkeypatch):
    def broken(stream):
        raise PdfReadError("EOF marker not found")
    
    monkeypatch.setattr(descriptor_reader, "PdfReader", broken)
    
    with pytest.raises(StructuralParseError) as exc_info:
        DescriptorReader.read(BytesIO(b"garbage"), "broken.pdf")
    
    assert exc_info.value.phase == "parse"
    assert not exc_info.value.retryable


def test_empty_file_is_structural_error():
    with pytest.raises(StructuralParseError):
        DescriptorReader.read(BytesIO(b""), "zero-bytes.pdf")
