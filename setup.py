from setuptools import setup

setup(name='swipeable',
      version='0.1',
      description='swipeable - classify touch drags into up/down/left/right swipes',
      packages=['swipeable', 'swipeable.gestures', 'swipeable.gestures.provider'],
      scripts=['bin/swipeable-monitor'],
      python_requires='>=3.9',
      install_requires=[
          'evdev'
      ],
      extras_require={
          'test': ['pytest']
      })
