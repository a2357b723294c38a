import pytest

from q3serverlist.packets import (
    OOB_PREFIX, PacketKind, classify, is_out_of_band, strip_prefix, wrap
)


class TestOutOfBand:

    @pytest.mark.parametrize('datagram', [
        b'',
        b'\xFF\xFF\xFF\xFF',
        b'\xFF\xFF\xFFi',
    ])
    def test_rejects_short_datagrams(self, datagram):
        assert not is_out_of_band(datagram)

    def test_rejects_missing_marker(self):
        assert not is_out_of_band(b'\xFF\xFF\xFF\x00infoResponse')
        assert not is_out_of_band(b'infoResponse\\a\\b')

    @pytest.mark.parametrize('fifth', [b'1', b' ', b'\\', b'\xFF', b'\n'])
    def test_rejects_non_letter(self, fifth):
        assert not is_out_of_band(OOB_PREFIX + fifth + b'abc')

    def test_accepts_letter(self):
        assert is_out_of_band(OOB_PREFIX + b'i')
        assert is_out_of_band(OOB_PREFIX + b'getserversResponse\\')


def test_strip_prefix():
    assert strip_prefix(OOB_PREFIX + b'infoResponse') == b'infoResponse'


def test_wrap():
    assert wrap('getinfo', b'xxx') == b'\xFF\xFF\xFF\xFFgetinfo xxx'
    assert wrap('getservers') == b'\xFF\xFF\xFF\xFFgetservers'


class TestClassify:

    def test_master_response(self):
        packet = classify(OOB_PREFIX + b'getserversResponse\\\x7f\x00\x00\x01\x6d\x38')
        assert packet.kind is PacketKind.MASTER_RESPONSE
        assert packet.payload.startswith(b'getserversResponse')

    def test_info_response(self):
        packet = classify(OOB_PREFIX + b'infoResponse\n\\a\\b')
        assert packet.kind is PacketKind.INFO_RESPONSE
        assert packet.payload == b'infoResponse\n\\a\\b'

    def test_unrecognized(self):
        assert classify(OOB_PREFIX + b'statusResponse\n').kind is PacketKind.UNRECOGNIZED

    def test_prefix_match_is_case_sensitive(self):
        assert classify(OOB_PREFIX + b'inforesponse\n').kind is PacketKind.UNRECOGNIZED

    def test_not_out_of_band(self):
        packet = classify(b'\x01\x02\x03\x04\x05')
        assert packet.kind is PacketKind.NOT_OUT_OF_BAND
        assert packet.payload == b'\x01\x02\x03\x04\x05'
