import pytest

from renderkit.descriptors import (
    ALL_MIPS,
    FORMAT_UNKNOWN,
    MAX_SRV_COUNT,
    DescriptorHeap,
    ViewDimension,
    ViewType,
)


def test_default_heap_size_matches_limit():
    heap = DescriptorHeap()
    assert heap.max_count == MAX_SRV_COUNT == 512


def test_allocation_starts_after_reserved_slot():
    heap = DescriptorHeap()
    first = heap.allocate()
    second = heap.allocate()
    assert first == 1
    assert second == first + 1


def test_capacity_runs_out_after_max_count():
    heap = DescriptorHeap(max_count=2)
    assert heap.has_capacity()
    heap.allocate()
    assert heap.has_capacity()
    heap.allocate()
    assert not heap.has_capacity()


def test_handles_are_evenly_spaced():
    heap = DescriptorHeap(descriptor_size=64, cpu_start=1000, gpu_start=5000)
    assert heap.cpu_handle(0) == 1000
    assert heap.gpu_handle(0) == 5000
    for index in (1, 7, 100):
        assert heap.cpu_handle(index) - heap.cpu_handle(0) == 64 * index
        assert heap.gpu_handle(index) - heap.gpu_handle(0) == 64 * index


@pytest.mark.parametrize("index", [-1, 512, 1000])
def test_handle_out_of_range(index):
    heap = DescriptorHeap()
    with pytest.raises(IndexError):
        heap.cpu_handle(index)
    with pytest.raises(IndexError):
        heap.gpu_handle(index)


def test_texture_2d_view():
    heap = DescriptorHeap()
    index = heap.allocate()
    view = heap.create_texture_srv(index, "tex", "R8G8B8A8", 9)
    assert heap.view(index) == view
    assert view.dimension is ViewDimension.TEXTURE_2D
    assert view.view_type is ViewType.SHADER_RESOURCE
    assert view.mip_levels == 9
    assert view.format == "R8G8B8A8"
    assert view.resource == "tex"


def test_cubemap_view_uses_all_mips():
    heap = DescriptorHeap()
    index = heap.allocate()
    view = heap.create_texture_srv(index, "sky", "BC7", 3, is_cubemap=True)
    assert view.dimension is ViewDimension.TEXTURE_CUBE
    assert view.mip_levels == ALL_MIPS
    assert view.most_detailed_mip == 0
    assert view.min_lod_clamp == 0.0


def test_structured_buffer_srv():
    heap = DescriptorHeap()
    index = heap.allocate()
    view = heap.create_structured_buffer_srv(index, "buf", 1024, 48)
    assert view.dimension is ViewDimension.BUFFER
    assert view.format == FORMAT_UNKNOWN
    assert (view.first_element, view.num_elements, view.stride) == (0, 1024, 48)
    assert view.view_type is ViewType.SHADER_RESOURCE


def test_structured_buffer_uav():
    heap = DescriptorHeap()
    index = heap.allocate()
    view = heap.create_structured_buffer_uav(index, "buf", 16, 4)
    assert view.view_type is ViewType.UNORDERED_ACCESS
    assert view.dimension is ViewDimension.BUFFER
    assert heap.view(index).num_elements == 16


def test_view_overwrites_slot():
    heap = DescriptorHeap()
    index = heap.allocate()
    heap.create_structured_buffer_srv(index, "a", 1, 1)
    heap.create_structured_buffer_uav(index, "b", 2, 2)
    assert heap.view(index).resource == "b"
    assert len(heap) == 1


def test_empty_slot_raises():
    heap = DescriptorHeap()
    with pytest.raises(KeyError):
        heap.view(3)


def test_view_outside_heap_raises():
    heap = DescriptorHeap(max_count=4)
    with pytest.raises(IndexError):
        heap.create_texture_srv(4, "tex", "fmt", 1)


@pytest.mark.parametrize("kwargs", [{"max_count": 0}, {"descriptor_size": 0}])
def test_invalid_heap(kwargs):
    with pytest.raises(ValueError):
        DescriptorHeap(**kwargs)