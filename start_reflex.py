"""
Document Analyzer 启动脚本
校验配置后启动 Reflex 前端 (port 3000)，就绪后自动打开浏览器
支持 Ctrl+C 完全终止所有进程（包括子进程）
"""
import os
import signal
import subprocess
import sys
import time
import urllib.request
import webbrowser

from analyzer_client.utils.config_loader import ConfigError, load_settings

# 目录配置
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
REFLEX_DIR = os.path.join(PROJECT_ROOT, "analyzer_web")

FRONTEND_PORT = 3000
MAX_WAIT_SECONDS = 60

# 退出标志
should_exit = False


def kill_process_tree(proc: subprocess.Popen) -> None:
    """终止进程及其所有子进程"""
    if proc.poll() is not None:
        return
    try:
        if sys.platform == "win32":
            # /T = 终止子进程, /F = 强制终止
            subprocess.run(
                ["taskkill", "/F", "/T", "/PID", str(proc.pid)],
                capture_output=True,
                timeout=10,
            )
        else:
            os.killpg(os.getpgid(proc.pid), signal.SIGTERM)
            proc.wait(timeout=10)
    except (OSError, subprocess.SubprocessError) as e:
        print(f"   警告: 清理 PID {proc.pid} 时出错: {e}")


def signal_handler(sig, frame):
    """处理 Ctrl+C 信号"""
    global should_exit
    should_exit = True


def frontend_env() -> dict:
    env = os.environ.copy()
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = os.pathsep.join([PROJECT_ROOT, existing]) if existing else PROJECT_ROOT
    return env


def spawn_frontend() -> subprocess.Popen:
    """
    在 analyzer_web 目录下启动 reflex run

    子进程的工作目录不是项目根目录，因此把 PROJECT_ROOT 加入 PYTHONPATH，
    未执行 pip install -e . 时也能导入 analyzer_client。
    """
    reflex_cmd = "reflex"
    if sys.platform == "win32":
        venv_reflex = os.path.join(PROJECT_ROOT, ".venv", "Scripts", "reflex.exe")
        if os.path.exists(venv_reflex):
            reflex_cmd = venv_reflex

    kwargs = {}
    if sys.platform == "win32":
        kwargs["creationflags"] = subprocess.CREATE_NEW_PROCESS_GROUP
    else:
        kwargs["start_new_session"] = True

    return subprocess.Popen(
        [reflex_cmd, "run", "--frontend-port", str(FRONTEND_PORT)],
        cwd=REFLEX_DIR,
        env=frontend_env(),
        **kwargs,
    )


def wait_and_open_browser() -> None:
    url = f"http://localhost:{FRONTEND_PORT}"
    print("⏳ 等待前端编译完成...")
    for _ in range(MAX_WAIT_SECONDS):
        if should_exit:
            return
        try:
            urllib.request.urlopen(url, timeout=2)
        except OSError:
            time.sleep(1)
            continue
        print("🌐 前端就绪，正在打开浏览器...")
        webbrowser.open(url)
        return
    print("⚠️ 前端启动超时，请手动打开浏览器\n")


def main() -> int:
    # 配置缺失时直接退出，而不是带着空地址启动
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"❌ 配置错误: {e}")
        return 1

    print("=" * 60)
    print("🚀 Document Analyzer 启动脚本")
    print("=" * 60)
    print(f"📂 项目目录: {PROJECT_ROOT}")
    print(f"🔗 分析后端: {settings.backend_url}")
    print("💡 按 Ctrl+C 可完全停止所有服务")
    print("=" * 60 + "\n")

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    frontend = spawn_frontend()
    try:
        wait_and_open_browser()
        while not should_exit:
            if frontend.poll() is not None:
                print("⚠️ Reflex 前端已退出")
                break
            time.sleep(0.5)
    finally:
        print("\n🛑 正在停止前端...")
        kill_process_tree(frontend)
        print("✅ 所有服务已停止")
    return 0


if __name__ == "__main__":
    sys.exit(main())
