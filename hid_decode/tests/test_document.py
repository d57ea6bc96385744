"""test shaping and serializing the decoded document"""
import json

from common_test_base import MOUSE_DESCRIPTOR, CommonTestBase

from hid_decode.document import (FORMAT_VERSION, Document, JsonDescriptor, JsonItem, Layout,
                                 as_int32, layout_for, shape)
from hid_decode.protocol.items import ReportDescriptorItems
from hid_decode.resolver import resolve_all


class TestLayout(CommonTestBase):
    """test the presentation mode"""
    def test_layout_for(self):
        """skip_data always means indented"""
        self.assertEqual(layout_for(pretty=False, skip_data=False), Layout.COMPACT)
        self.assertEqual(layout_for(pretty=True, skip_data=False), Layout.INDENTED)
        self.assertEqual(layout_for(pretty=False, skip_data=True), Layout.INDENTED)
        self.assertEqual(layout_for(pretty=True, skip_data=True), Layout.INDENTED)


class TestDocument(CommonTestBase):
    """test the document shaper"""
    def shape_hex(self, data: str, skip_data: bool = False) -> Document:
        """shape a hex descriptor"""
        descriptor: bytes = bytes.fromhex(data)
        return shape(descriptor, resolve_all(ReportDescriptorItems(descriptor), self.tables), skip_data=skip_data)

    def test_as_int32(self):
        """unsigned 32 bit values reinterpreted as signed"""
        self.assertEqual(as_int32(0x81), 0x81)
        self.assertEqual(as_int32(0x7FFFFFFF), 0x7FFFFFFF)
        self.assertEqual(as_int32(0xFFFFFFFF), -1)
        self.assertEqual(as_int32(0x80000000), -0x80000000)

    def test_empty_descriptor(self):
        """no items"""
        document: Document = self.shape_hex('')
        self.assertEqual(document.to_dict(), {'version': FORMAT_VERSION,
                                              'descriptor': {'length': 0, 'data': []},
                                              'items': []})

    def test_item_fields(self):
        """all fields in order, absent fields left out"""
        document: Document = self.shape_hex('0501' '0902' 'a101' '27ffffffff' 'c0')
        self.assertEqual(document.descriptor.length, 12)
        items: list[dict] = [item.to_dict() for item in document.items]
        self.assertEqual(items[0], {'offset': 0, 'data': [0x05, 0x01], 'type': 'Global', 'name': 'UsagePage',
                                    'value': 1, 'usage_page': 'Generic Desktop'})
        self.assertEqual(list(items[0]), ['offset', 'data', 'type', 'name', 'value', 'usage_page'])
        self.assertEqual(items[1], {'offset': 2, 'data': [0x09, 0x02], 'type': 'Local', 'name': 'Usage',
                                    'value': 2, 'usage': 'Mouse'})
        self.assertEqual(items[2], {'offset': 4, 'data': [0xA1, 0x01], 'type': 'Main', 'name': 'Collection',
                                    'value': 1, 'collection': 'Application'})
        self.assertEqual(items[3]['value'], -1)
        self.assertEqual(items[4], {'offset': 11, 'data': [0xC0], 'type': 'Main', 'name': 'EndCollection'})

    def test_collection_only_on_collection_items(self):
        """the collection kind appears on the Collection item and nowhere else"""
        document: Document = self.shape_hex('0501' '0902' 'a101' '0901' '8102' 'c0')
        collections: list[str] = [item.collection for item in document.items if item.collection]
        self.assertEqual(collections, ['Application'])
        self.assertEqual(document.items[2].collection, 'Application')

    def test_skip_data(self):
        """no data anywhere, everything else is the same"""
        with_data: dict = self.shape_hex(MOUSE_DESCRIPTOR.hex()).to_dict()
        without_data: dict = self.shape_hex(MOUSE_DESCRIPTOR.hex(), skip_data=True).to_dict()
        self.assertNotIn('data', without_data['descriptor'])
        self.assertTrue(all('data' not in item for item in without_data['items']))

        del with_data['descriptor']['data']
        for item in with_data['items']:
            del item['data']
        self.assertEqual(with_data, without_data)

    def test_compact_json(self):
        """a single line without whitespace"""
        output: str = self.shape_hex('0501').to_json(Layout.COMPACT)
        self.assertEqual(output, '{"version":"1.0","descriptor":{"length":2,"data":[5,1]},"items":'
                                 '[{"offset":0,"data":[5,1],"type":"Global","name":"UsagePage","value":1,'
                                 '"usage_page":"Generic Desktop"}]}')

    def test_indented_json(self):
        """indented, same content"""
        document: Document = self.shape_hex(MOUSE_DESCRIPTOR.hex(), skip_data=True)
        output: str = document.to_json(Layout.INDENTED)
        self.assertIn('\n  "descriptor": {\n', output)
        self.assertEqual(json.loads(output), document.to_dict())
        self.assertNotIn('null', output)

    def test_serializing_is_idempotent(self):
        """same input, same output"""
        first: str = self.shape_hex(MOUSE_DESCRIPTOR.hex()).to_json()
        second: str = self.shape_hex(MOUSE_DESCRIPTOR.hex()).to_json()
        self.assertEqual(first, second)

    def test_defaults(self):
        """directly constructed records"""
        document: Document = Document(descriptor=JsonDescriptor(length=1), items=[JsonItem(offset=0)])
        self.assertEqual(document.to_dict(), {'version': '1.0', 'descriptor': {'length': 1},
                                              'items': [{'offset': 0, 'type': 'Unknown', 'name': 'Unknown'}]})
