from minnowtcp.messages import TCPReceiverMessage, TCPSenderMessage
from minnowtcp.wrapping_integers import Wrap32


def test_empty_sender_message_occupies_no_sequence_numbers():
    msg = TCPSenderMessage()
    assert msg.sequence_length() == 0
    assert msg.seqno == Wrap32(0)
    assert msg.payload == b""


def test_syn_occupies_one_sequence_number():
    assert TCPSenderMessage(syn=True).sequence_length() == 1


def test_fin_occupies_one_sequence_number():
    assert TCPSenderMessage(fin=True).sequence_length() == 1


def test_payload_counts_toward_sequence_length():
    payload = b"hello"
    msg = TCPSenderMessage(payload=payload)
    assert msg.sequence_length() == len(payload)


def test_flags_and_payload_together():
    payload = b"abc"
    msg = TCPSenderMessage(syn=True, payload=payload, fin=True)
    assert msg.sequence_length() == len(payload) + 2


def test_rst_does_not_occupy_sequence_space():
    assert TCPSenderMessage(rst=True).sequence_length() == 0


def test_sender_message_equality():
    a = TCPSenderMessage(seqno=Wrap32(7), payload=b"x")
    b = TCPSenderMessage(seqno=Wrap32(7), payload=b"x")
    assert a == b
    assert a != TCPSenderMessage(seqno=Wrap32(8), payload=b"x")


def test_receiver_message_defaults():
    msg = TCPReceiverMessage()
    assert msg.ackno is None
    assert msg.window_size == 0
    assert msg.rst is False


def test_receiver_message_fields():
    msg = TCPReceiverMessage(ackno=Wrap32(3), window_size=1024)
    assert msg.ackno == Wrap32(3)
    assert msg.window_size == 1024