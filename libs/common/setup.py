from setuptools import setup, find_packages

setup(
    name="dash_common",
    version="0.2.0",
    packages=find_packages(),
    install_requires=[
        'redis>=5.0',  # 인증번호 저장소(redis.asyncio)를 위한 의존성
    ],
)
