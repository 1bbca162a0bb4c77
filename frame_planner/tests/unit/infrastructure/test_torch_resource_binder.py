from __future__ import annotations

import pytest

from frame_planner.application.transform_planning_stage import TransformPlanningStage
from frame_planner.core.geometry_types import AffineTransform, FrameSize
from frame_planner.infrastructure.torch_resource_binder import TorchResourceBinder


torch = pytest.importorskip("torch")


def test_torch_resource_binder_allocates_planned_output_on_cpu(frame_200x150: FrameSize) -> None:
    binder = TorchResourceBinder(device="cpu", dtype=torch.float32)
    stage = TransformPlanningStage(binder=binder)
    stage.configure(frame_200x150, AffineTransform.scaling(0.5, 1.0))

    stage.initialize_gpu_resource(3)

    assert binder.is_bound
    assert binder.input_resource == 3
    assert tuple(binder.output_tensor.shape) == (3, 100, 150)
    assert binder.output_tensor.dtype == torch.float32
    assert tuple(binder.residual_matrix.shape) == (3, 3)
    assert binder.residual_matrix[2].tolist() == [0.0, 0.0, 1.0]

    stage.release()

    assert not binder.is_bound
    assert binder.residual_matrix is None


def test_torch_resource_binder_rejects_bad_channel_count() -> None:
    with pytest.raises(ValueError):
        TorchResourceBinder(device="cpu", channels=0)


@pytest.mark.skipif(torch.cuda.is_available(), reason="checks the no-CUDA error path")
def test_torch_resource_binder_requires_cuda_for_cuda_device(frame_200x150: FrameSize) -> None:
    stage = TransformPlanningStage(binder=TorchResourceBinder(device="cuda"))
    stage.configure(frame_200x150, AffineTransform.identity())

    with pytest.raises(RuntimeError, match="CUDA"):
        stage.initialize_gpu_resource(0)


def test_main_binds_and_releases_output_buffer_on_configured_device(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    from frame_planner import main as main_module

    bound: list[TorchResourceBinder] = []
    original_bind = TorchResourceBinder.bind

    def _recording_bind(self: TorchResourceBinder, resource_handle, plan) -> None:
        original_bind(self, resource_handle, plan)
        bound.append(self)

    monkeypatch.setattr(TorchResourceBinder, "bind", _recording_bind)
    monkeypatch.setenv("INPUT_WIDTH", "200")
    monkeypatch.setenv("INPUT_HEIGHT", "150")
    monkeypatch.delenv("OUTPUT_HEIGHT", raising=False)
    monkeypatch.setenv("GPU_BIND", "1")
    monkeypatch.setenv("GPU_DEVICE", "cpu")

    main_module.main()

    assert "[INFO] [GPU] Bound output 200x150 on cpu" in capsys.readouterr().out
    assert len(bound) == 1
    # Released in main's finally block.
    assert not bound[0].is_bound
