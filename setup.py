# -*- coding: utf-8 -*-
"""
开发环境引导脚本（不是打包脚本，打包由 pyproject.toml 负责）。

用法:
    python setup.py        安装运行依赖
    python setup.py dev    安装开发依赖并启用 pre-commit
"""
import os
import shutil
import subprocess
import sys
from typing import List

VENV_DIR = ".venv"
EXAMPLE_FILES = {".env": ".env.example", "config.json": "config.example.json"}


def print_step(message: str):
    print(f"\n--- {message} ---")


def run_command(command: List[str], check: bool = True) -> int:
    """运行命令，输出直接流向终端。失败时退出脚本。"""
    print(f"执行: {' '.join(command)}")
    try:
        return subprocess.run(command, check=check).returncode
    except subprocess.CalledProcessError as e:
        print(f"错误: 命令 '{' '.join(command)}' 执行失败，退出码 {e.returncode}")
        sys.exit(1)
    except FileNotFoundError:
        print(f"错误: 命令未找到。请确认 '{command[0]}' 是否在您的系统 PATH 中。")
        sys.exit(1)


def ensure_uv_installed():
    if shutil.which("uv"):
        print("uv 已安装。")
        return
    print_step("未找到 uv，现在通过 pip 进行安装...")
    run_command([sys.executable, "-m", "pip", "install", "uv"])


def create_virtual_environment():
    if os.path.exists(VENV_DIR):
        print("虚拟环境已存在。")
        return
    print_step(f"正在创建虚拟环境: '{VENV_DIR}'...")
    run_command(["uv", "venv", VENV_DIR])


def install_dependencies(is_dev: bool):
    if is_dev:
        print_step("正在安装开发依赖...")
        run_command(["uv", "pip", "install", "-e", ".[dev]"])
    else:
        print_step("正在安装用户依赖...")
        run_command(["uv", "pip", "install", "."])


def copy_example_files():
    """首次设置时从示例文件生成 .env 和 config.json，已存在的文件不会被覆盖。"""
    for target, example in EXAMPLE_FILES.items():
        if not os.path.exists(target) and os.path.exists(example):
            shutil.copyfile(example, target)
            print(f"已从 {example} 生成 {target}，请填入实际配置。")


def main():
    is_dev = "dev" in sys.argv

    ensure_uv_installed()
    create_virtual_environment()
    install_dependencies(is_dev)
    copy_example_files()

    if is_dev:
        print_step("正在安装 pre-commit 钩子...")
        run_command(["uv", "run", "--", "pre-commit", "install"], check=False)

    print("\n✅ 设置完成！")
    print("运行机器人: uv run yang-gang-court")
    print("运行测试:   uv run pytest\n")


if __name__ == "__main__":
    main()
