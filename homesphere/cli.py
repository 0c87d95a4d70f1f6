from __future__ import annotations

import argparse
import json
from datetime import datetime, timedelta

from homesphere.config import load_hub_config
from homesphere.demo import build_demo_household
from homesphere.errors import SceneNotFoundError
from homesphere.hs_logging import set_log_level
from homesphere.system import HomeSphereSystem


def main(argv: list[str] | None = None) -> int:
    cfg = load_hub_config()

    parser = argparse.ArgumentParser(prog="homesphere-demo", description="Trigger a scene in the demo household")
    parser.add_argument("--scene", type=int, default=cfg.demo_scene_id)
    parser.add_argument("--hours", type=float, default=cfg.report_hours, help="energy report window")
    parser.add_argument("--log-level", default=cfg.log_level)
    args = parser.parse_args(argv)

    set_log_level(args.log_level.upper())

    system = HomeSphereSystem(build_demo_household())
    try:
        report = system.trigger_scene(args.scene)
    except SceneNotFoundError as e:
        print(json.dumps({"error": str(e)}))
        return 1

    end = datetime.now()
    readings = system.energy_report(end - timedelta(hours=args.hours), end)
    print(json.dumps({
        "scene": report.to_dict(),
        "energy_kwh": {r.device_name: r.kwh for r in readings},
    }, ensure_ascii=False, indent=2))
    return 0
