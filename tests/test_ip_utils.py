import pytest

from edakit.ip_utils import IP, ip_to_int


def test_default_ip():
    ip = IP()
    assert str(ip) == "0.0.0.0"
    assert ip_to_int(ip) == 0


def test_parse_and_show():
    ip = IP.parse("150.214.110.3")
    assert ip.octets == (150, 214, 110, 3)
    assert str(ip) == "150.214.110.3"


def test_parse_uses_first_word():
    assert IP.parse("  10.0.0.1 extra") == IP(10, 0, 0, 1)


def test_to_int():
    assert ip_to_int(IP.parse("150.214.110.3")) == 2530635267
    assert ip_to_int(IP(255, 255, 255, 255)) == 4294967295
    assert ip_to_int(IP(0, 0, 1, 0)) == 256


def test_equality_and_order():
    assert IP(1, 2, 3, 4) == IP.parse("1.2.3.4")
    assert IP(1, 2, 3, 4) < IP(1, 2, 4, 0)
    assert not IP(2, 0, 0, 0) < IP(1, 255, 255, 255)


def test_usable_as_dict_key():
    counts = {IP(1, 1, 1, 1): 3}
    assert counts[IP.parse("1.1.1.1")] == 3


@pytest.mark.parametrize(
    "text",
    ["", "1.2.3", "256.1.1.1", "1.2.3.-1", "a.b.c.d", "1.2.x.4", "1.2.3.999"],
)
def test_wrong_format(text):
    with pytest.raises(ValueError, match="Ip: wrong input format."):
        IP.parse(text)


def test_constructor_rejects_out_of_range():
    with pytest.raises(ValueError):
        IP(1, 2, 3, 300)