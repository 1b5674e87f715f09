"""
后端连通性诊断脚本
通过客户端调用日志接口，确认分析服务可达并返回合法数据
"""
import argparse
import sys

from analyzer_client.api.client import AnalysisServiceError, DocumentAnalysisClient
from analyzer_client.utils.config_loader import ConfigError, load_settings


def check_logs(client: DocumentAnalysisClient) -> bool:
    print("=" * 50)
    print(f"→ GET {client.base_url}/logs/")
    print("=" * 50)

    try:
        entries = client.list_logs()
    except AnalysisServiceError as e:
        print(f"  ❌ 失败 ({e.kind.value}): {e}")
        if e.status_code is not None:
            print(f"  状态码: {e.status_code}")
        return False

    print(f"  ✅ 成功，共 {len(entries)} 条日志")
    for entry in entries[:3]:
        print(f"  - [{entry.id}] {entry.timestamp}")
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Check that the analysis backend is reachable.")
    parser.add_argument("--url", help="Backend base URL (defaults to configuration)")
    parser.add_argument("--timeout", type=float, default=10, help="Request timeout in seconds")
    args = parser.parse_args()

    base_url = args.url
    if not base_url:
        try:
            base_url = load_settings().backend_url
        except ConfigError as e:
            print(f"❌ 配置错误: {e}")
            return 2

    client = DocumentAnalysisClient(base_url, timeout=args.timeout)
    return 0 if check_logs(client) else 1


if __name__ == "__main__":
    sys.exit(main())
