from __future__ import annotations

import logging
import os

from env_utils import parse_bool_env, parse_int_env
from frame_planner.application.transform_planning_stage import TransformPlanningStage
from frame_planner.application.transform_request_builder import TransformRequestBuilder
from frame_planner.config import load_planner_config
from frame_planner.config.log_config import apply_log_config
from frame_planner.infrastructure.torch_resource_binder import TorchResourceBinder
from logger.filtered_logger import LogChannel, info as log_info


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="[planner] %(message)s")
    apply_log_config()
    config = load_planner_config()

    # Env values win over planner.yaml so one frame can be planned without editing files.
    input_cfg = dict(config.get("input") or {})
    for key, env_name in (("width", "INPUT_WIDTH"), ("height", "INPUT_HEIGHT")):
        value = parse_int_env(env_name, input_cfg.get(key))
        if value is not None:
            input_cfg[key] = value
    config["input"] = input_cfg
    config["requested_output_height"] = parse_int_env(
        "OUTPUT_HEIGHT", config.get("requested_output_height")
    )
    gpu_cfg = config.get("gpu") or {}
    device = os.environ.get("GPU_DEVICE") or gpu_cfg.get("device", "cuda")
    bind = parse_bool_env("GPU_BIND", "1" if gpu_cfg.get("bind", False) else "0")

    request = TransformRequestBuilder().configure(config)
    logging.info(
        "Planning %dx%d with requested height %s",
        request.input_size.width,
        request.input_size.height,
        request.requested_height,
    )
    stage = TransformPlanningStage(binder=TorchResourceBinder(device=device))
    try:
        output_size = stage.configure(request.input_size, request.transform, request.requested_height)
        log_info(
            LogChannel.GLOBAL,
            f"output={output_size.width}x{output_size.height} "
            f"rotation={stage.output_rotation_degrees()} should_process={stage.should_process()}",
        )
        # An unprocessed frame is passed through, so there is nothing to allocate.
        if bind and stage.should_process():
            stage.initialize_gpu_resource(parse_int_env("INPUT_TEXTURE_ID", 0))
            log_info(LogChannel.GPU, f"Bound output {output_size.width}x{output_size.height} on {device}")
    finally:
        stage.release()


if __name__ == "__main__":
    main()
