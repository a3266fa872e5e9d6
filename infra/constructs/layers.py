import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

COMMON_LAYER_SOURCE_PATH = "layers/common_layer"


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """ローカル環境で依存ライブラリをインストールするBundlingクラス

    uv → pip の順に試し、どちらも使えなければ Docker バンドリングに任せる。
    """

    INSTALLERS: tuple[tuple[str, ...], ...] = (
        ("uv", "pip", "install", "--quiet", "--target"),
        ("pip", "install", "--quiet", "-t"),
    )

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する。

        Args:
            output_dir: 出力先ディレクトリ
            options: BundlingOptions（未使用だが必須）

        Returns:
            True: バンドリング成功（Dockerをスキップ）
            False: バンドリング失敗（Dockerにフォールバック）
        """
        del options  # unused
        requirements_path = Path(self.source_path) / "requirements.txt"
        target_dir = Path(output_dir) / "python"

        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        for installer in self.INSTALLERS:
            if self._try_install(installer, requirements_path, target_dir):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    def _try_install(
        self, installer: tuple[str, ...], requirements_path: Path, target_dir: Path
    ) -> bool:
        """指定のインストーラで requirements.txt をインストールする。"""
        name = installer[0]
        try:
            logger.info("Trying local bundling with %s...", name)
            subprocess.run(
                [*installer, str(target_dir), "-r", str(requirements_path)],
                check=True,
            )
            logger.info("Local bundling with %s succeeded", name)
            return True
        except FileNotFoundError:
            logger.debug("%s not found", name)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", name, e)
            return False


class Layers(Construct):
    """Lambda Layers Construct（aws-lambda-powertools / pydantic）"""

    def __init__(
        self, scope: Construct, id: str, source_path: str = COMMON_LAYER_SOURCE_PATH
    ) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                source_path,
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_14.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(source_path),
                ),
            ),
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_14],
            description="Common dependencies Library",
        )
