import os


def get_out_path() -> str:
    out_path_from_env = os.environ.get("PQ_OUT_DIR")
    if out_path_from_env is not None:
        out_path = os.path.expanduser(out_path_from_env)
    else:
        out_path = os.path.abspath("./out")
    if os.path.exists(out_path) and not os.path.isdir(out_path):
        raise NotADirectoryError(f"The output path {out_path} is not a directory!")
    os.makedirs(out_path, exist_ok=True)
    return out_path
