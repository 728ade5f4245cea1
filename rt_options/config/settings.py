"""
Options file formats.

Options records can be stored as JSON or YAML. A file holds either a
single record, or one record per atmospheric profile under a top-level
``profiles`` key.

Example YAML input:
    profiles:
      - use_emissivity: true
        emissivity: [0.95, 0.96, 0.97]
        zeeman_input: {field_strength: 0.45, cos_theta_b: 0.5}
      - aircraft_pressure: 250.0
"""

from pathlib import Path
from typing import Any, Dict, List, Union
import json

import yaml

from rt_options.core.constants import DEFAULT_AIRCRAFT_PRESSURE
from rt_options.inputs.ssu import SSUInput
from rt_options.inputs.zeeman import ZeemanInput
from rt_options.options.record import Options

PROFILES_KEY = "profiles"
JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def options_from_dict(options_dict: Dict[str, Any]) -> Options:
    """Create an Options record from a dictionary.

    Missing keys take their defaults. Per-channel arrays are created
    from ``n_channels`` or, when absent, from the length of the supplied
    ``emissivity``/``direct_reflectivity`` lists.

    Args:
        options_dict: Options dictionary

    Returns:
        Options instance

    Raises:
        ValueError: If the per-channel lists disagree in length
    """
    options = Options(
        check_input=options_dict.get("check_input", True),
        use_old_mw_emissivity_model=options_dict.get("use_old_mw_emissivity_model", False),
        use_antenna_correction=options_dict.get("use_antenna_correction", False),
        apply_nlte_correction=options_dict.get("apply_nlte_correction", True),
        aircraft_pressure=float(options_dict.get("aircraft_pressure", DEFAULT_AIRCRAFT_PRESSURE)),
        include_scattering=options_dict.get("include_scattering", True),
        channel=options_dict.get("channel", 0),
        use_emissivity=options_dict.get("use_emissivity", False),
        use_direct_reflectivity=options_dict.get("use_direct_reflectivity", False),
        use_n_streams=options_dict.get("use_n_streams", False),
        n_streams=options_dict.get("n_streams", 0),
        scan_input=SSUInput.from_dict(options_dict.get("scan_input", {})),
        zeeman_input=ZeemanInput.from_dict(options_dict.get("zeeman_input", {})),
    )

    emissivity = options_dict.get("emissivity")
    direct_reflectivity = options_dict.get("direct_reflectivity")
    lengths = {
        len(values) for values in (emissivity, direct_reflectivity) if values is not None
    }
    if "n_channels" in options_dict:
        lengths.add(int(options_dict["n_channels"]))
    if len(lengths) > 1:
        raise ValueError(
            f"Inconsistent per-channel lengths in options: {sorted(lengths)}"
        )

    if lengths:
        options.create(lengths.pop())
        if options.associated():
            if emissivity is not None:
                options.emissivity = emissivity
            if direct_reflectivity is not None:
                options.direct_reflectivity = direct_reflectivity
    return options


def options_to_dict(options: Options) -> Dict[str, Any]:
    """Convert an Options record to a dictionary.

    Per-channel arrays are only written for allocated records.
    """
    options_dict = {
        "check_input": bool(options.check_input),
        "use_old_mw_emissivity_model": bool(options.use_old_mw_emissivity_model),
        "use_antenna_correction": bool(options.use_antenna_correction),
        "apply_nlte_correction": bool(options.apply_nlte_correction),
        "aircraft_pressure": float(options.aircraft_pressure),
        "include_scattering": bool(options.include_scattering),
        "channel": int(options.channel),
        "use_emissivity": bool(options.use_emissivity),
        "use_direct_reflectivity": bool(options.use_direct_reflectivity),
        "use_n_streams": bool(options.use_n_streams),
        "n_streams": int(options.n_streams),
        "scan_input": options.scan_input.to_dict(),
        "zeeman_input": options.zeeman_input.to_dict(),
    }
    if options.associated():
        options_dict["n_channels"] = options.n_channels
        options_dict["emissivity"] = options.emissivity.tolist()
        options_dict["direct_reflectivity"] = options.direct_reflectivity.tolist()
    return options_dict


def load_options(path: Union[str, Path]) -> Union[Options, List[Options]]:
    """Load Options from a JSON or YAML file.

    Args:
        path: Path to the options file

    Returns:
        A list of Options if the file has a ``profiles`` list,
        otherwise a single Options record

    Raises:
        ValueError: If the file format is not supported
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise ValueError(f"Unsupported options file format: {path.suffix}")

    with open(path, 'r') as f:
        if suffix in JSON_SUFFIXES:
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Options file must contain a mapping, got {type(data).__name__}")

    if PROFILES_KEY in data:
        return [options_from_dict(profile) for profile in data[PROFILES_KEY]]
    return options_from_dict(data)


def save_options(
    options: Union[Options, List[Options]],
    path: Union[str, Path],
    indent: int = 2,
) -> None:
    """Save one Options record, or one per profile, to JSON or YAML.

    Args:
        options: Record or list of records
        path: Output file path; the suffix selects the format
        indent: JSON indentation level

    Raises:
        ValueError: If the file format is not supported
    """
    path = Path(path)
    if isinstance(options, Options):
        data = options_to_dict(options)
    else:
        data = {PROFILES_KEY: [options_to_dict(record) for record in options]}

    suffix = path.suffix.lower()
    if suffix in JSON_SUFFIXES:
        with open(path, 'w') as f:
            json.dump(data, f, indent=indent)
    elif suffix in YAML_SUFFIXES:
        with open(path, 'w') as f:
            yaml.safe_dump(data, f, sort_keys=False)
    else:
        raise ValueError(f"Unsupported options file format: {path.suffix}")
