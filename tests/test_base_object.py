import pytest

from eipscan.base_object import BaseObject


def test_ids_are_kept():
    obj = BaseObject(0x37, 5)
    assert obj.class_id == 0x37
    assert obj.instance_id == 5


def test_ids_are_read_only():
    obj = BaseObject(1, 2)
    with pytest.raises(AttributeError):
        obj.class_id = 3
    with pytest.raises(AttributeError):
        obj.instance_id = 3
    assert (obj.class_id, obj.instance_id) == (1, 2)


@pytest.mark.parametrize("class_id, instance_id", [(-1, 0), (0, 0x10000), (0x10000, 1)])
def test_out_of_range_ids_rejected(class_id, instance_id):
    with pytest.raises(ValueError):
        BaseObject(class_id, instance_id)


def test_repr_names_ids():
    text = repr(BaseObject(15, 7))
    assert "class_id=15" in text
    assert "instance_id=7" in text